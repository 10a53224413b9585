import matplotlib.pyplot as plt
import json
from datetime import datetime

from simulator.interfaces.trace_sink import ITraceSink, TraceRecord


class Statistics(ITraceSink):
    """
    Listens to the step trace as an independent "recorder" and
    keeps what the elevator can observe about itself: position over time,
    door activity and the raw step log.
    Collects all records in JSON Lines format for offline playback.
    """
    def __init__(self, elevator_name="Elevator"):
        self.elevator_name = elevator_name
        self.trajectory = []  # (time, floor) whenever the floor changes
        self.door_events_history = []  # {'timestamp', 'floor', 'event_type'}
        self.step_counts = {}  # Executed steps by label

        # JSON Lines event log for offline playback
        self.event_log = []
        self.simulation_metadata = {}

        self._last_floor = None

    def _add_event_log(self, event_type, time, event_data):
        """
        Add an event to the JSON Lines log.

        Args:
            event_type (str): Type of event (e.g., 'step', 'door')
            time (int): Simulation time of the event
            event_data (dict): Event-specific data
        """
        event = {
            "time": time,
            "type": event_type,
            "data": event_data
        }
        self.event_log.append(event)

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration (SimulationConfig.to_dict())
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def record(self, record: TraceRecord):
        self.step_counts[record.step] = self.step_counts.get(record.step, 0) + 1
        self._add_event_log('step', record.time, record.to_dict())

        if record.floor != self._last_floor:
            self.trajectory.append((record.time, record.floor))
            self._last_floor = record.floor

        door_event = self._classify_door_event(record)
        if door_event:
            self.door_events_history.append({
                'timestamp': record.time,
                'floor': record.floor,
                'event_type': door_event
            })
            self._add_event_log('door', record.time, {
                'elevator': self.elevator_name,
                'floor': record.floor,
                'event_type': door_event
            })

    @staticmethod
    def _classify_door_event(record):
        if record.step == "E3":
            return "DOOR_OPENING_START"
        if record.step == "E5":
            # While people are still moving the doors only flutter
            return "DOOR_FLUTTER" if record.d1 else "DOOR_CLOSING_START"
        return None

    def get_door_open_count(self):
        return sum(1 for e in self.door_events_history if e['event_type'] == "DOOR_OPENING_START")

    def get_floors_travelled(self):
        floors = [floor for _, floor in self.trajectory]
        return sum(abs(b - a) for a, b in zip(floors, floors[1:]))

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False):
        """Draw trajectory diagram after simulation ends

        Args:
            output_filename: Where to save the PNG
            show: If True, also open an interactive window
        """
        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        plt.figure(figsize=(14, 8))

        if self.trajectory:
            times, floors = zip(*self.trajectory)
            plt.step(times, floors, where='post', label=self.elevator_name, linewidth=2.5,
                     color='#1f77b4', alpha=0.8)

        self._plot_door_events()

        plt.title("Elevator Trajectory Diagram (Travel Diagram)")
        plt.xlabel("Time (0.1 s)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)

        all_floors = [floor for _, floor in self.trajectory]
        if all_floors:
            plt.yticks(range(int(min(all_floors)), int(max(all_floors)) + 2))

        plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close()
        return output_filename

    def _plot_door_events(self):
        """Draw door events with different markers for each event type"""
        # Vertical offset for door events (shift slightly above floor)
        door_event_offset = 0.15
        styles = {
            "DOOR_OPENING_START": ('<', 'green', 'Door Opening Start'),
            "DOOR_CLOSING_START": ('>', 'red', 'Door Closing Start'),
            "DOOR_FLUTTER": ('x', 'orange', 'Door Flutter'),
        }

        for event_type, (marker, color, label) in styles.items():
            events = [e for e in self.door_events_history if e['event_type'] == event_type]
            if not events:
                continue
            plt.scatter([e['timestamp'] for e in events],
                        [e['floor'] + door_event_offset for e in events],
                        s=100, marker=marker, alpha=0.8, color=color, linewidth=1.5, label=label)

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file (default: 'simulation_log.jsonl')
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            # Write metadata as first line
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename
