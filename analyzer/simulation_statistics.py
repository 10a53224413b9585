import numpy as np

from .statistics import Statistics


class SimulationStatistics(Statistics):
    """
    Simulator-only statistics with "God's view" access.

    Features:
    - Access to individual passenger objects
    - Detailed per-passenger metrics
    - Perfect information about who gave up and when

    Times are in simulation ticks (tenths of a second).
    """
    METRICS = {
        'waiting_to_boarding': ('Waiting Time (Queue to Boarding)', 'get_waiting_time_to_boarding'),
        'riding': ('Riding Time', 'get_riding_time'),
        'total_journey': ('Total Journey Time', 'get_total_journey_time'),
        'until_give_up': ('Time Until Giving Up', 'get_time_until_give_up'),
    }

    def __init__(self, elevator_name="Elevator"):
        super().__init__(elevator_name)

        # God's view data (simulation-only)
        self.passengers = []

    def register_passengers(self, passengers):
        self.passengers.extend(passengers)

    def passenger_metrics(self):
        """
        Summarize the registered passengers.

        Returns:
            dict with user counts and, per metric, count/mean/min/max/p95
            (None when no user has a value for it)
        """
        summary = {
            'users': len(self.passengers),
            'delivered': sum(1 for p in self.passengers if p.alighting_time is not None),
            'gave_up': sum(1 for p in self.passengers if p.gave_up_time is not None),
            'in_system': sum(1 for p in self.passengers if p.in_system),
        }

        for key, (_, getter) in self.METRICS.items():
            values = [getattr(p, getter)() for p in self.passengers]
            values = np.array([v for v in values if v is not None], dtype=float)
            if values.size == 0:
                summary[key] = None
                continue
            summary[key] = {
                'count': int(values.size),
                'mean': float(np.mean(values)),
                'min': float(np.min(values)),
                'max': float(np.max(values)),
                'p95': float(np.percentile(values, 95)),
            }
        return summary

    def print_passenger_metrics_summary(self):
        """
        Print detailed per-passenger metrics.

        Metrics include:
        - Waiting time (queue to boarding)
        - Riding time
        - Total journey time
        - Time until giving up
        """
        summary = self.passenger_metrics()

        print("\n" + "="*80)
        print("   PASSENGER METRICS SUMMARY (SIMULATION ONLY)")
        print("="*80)
        print(f"Users:     {summary['users']:>6}")
        print(f"Delivered: {summary['delivered']:>6}")
        print(f"Gave up:   {summary['gave_up']:>6}")
        print(f"In system: {summary['in_system']:>6}")
        print(f"Door openings:    {self.get_door_open_count():>6}")
        print(f"Floors travelled: {self.get_floors_travelled():>6}")

        for key, (title, _) in self.METRICS.items():
            stats = summary[key]
            if stats is None:
                continue
            print(f"\n{title}:")
            print(f"  Count:   {stats['count']:>8} users")
            print(f"  Average: {stats['mean']:>8.1f} ticks")
            print(f"  Min:     {stats['min']:>8.1f} ticks")
            print(f"  Max:     {stats['max']:>8.1f} ticks")
            print(f"  P95:     {stats['p95']:>8.1f} ticks")

        print("="*80)
