from typing import Optional

from ..infrastructure.scheduling import SchedulingHandle


class Passenger:
    """
    A user of the elevator, from arrival (U1) until alighting (U6) or giving up (U4).

    Design:
    - Holds a membership reference to the container it is in (a FloorQueue,
      the CarManifest, or None before queueing and after leaving)
    - Owns two scheduling handles: `process` for its own steps and
      `give_up_timer` for U4
    - Tracks its own timing metrics like the analyzer expects
    """

    def __init__(self, passenger_id: int, origin: int, destination: int, give_up_time: int,
                 arrival_time: int = 0):
        """
        Args:
            passenger_id: Sequential user number
            origin: Floor where the user enters the system
            destination: Floor the user wants to go to (must differ from origin)
            give_up_time: Patience in tenths of a second
            arrival_time: Simulation time of arrival
        """
        if destination == origin:
            raise ValueError(f"User {passenger_id}: destination must differ from origin ({origin})")
        if give_up_time <= 0:
            raise ValueError(f"User {passenger_id}: give_up_time must be positive")

        self.id = passenger_id
        self.name = f"User_{passenger_id}"
        self.origin = origin
        self.destination = destination
        self.give_up_time = give_up_time

        self.container = None
        self.process = SchedulingHandle(f"{self.name}/process")
        self.give_up_timer = SchedulingHandle(f"{self.name}/give_up")

        # Passenger metrics (self-tracking)
        self.arrival_time = arrival_time
        self.waiting_start_time: Optional[int] = None
        self.boarding_time: Optional[int] = None
        self.alighting_time: Optional[int] = None
        self.gave_up_time: Optional[int] = None

    @property
    def going_up(self) -> bool:
        return self.destination > self.origin

    @property
    def in_system(self) -> bool:
        return self.alighting_time is None and self.gave_up_time is None

    def __repr__(self):
        return f"Passenger({self.id}, {self.origin}->{self.destination})"

    # ========================================
    # Passenger Metrics Methods (Self-tracking)
    # ========================================

    def get_waiting_time_to_boarding(self) -> Optional[int]:
        """Ticks from entering the queue to boarding, or None if never boarded"""
        if self.waiting_start_time is not None and self.boarding_time is not None:
            return self.boarding_time - self.waiting_start_time
        return None

    def get_riding_time(self) -> Optional[int]:
        if self.boarding_time is not None and self.alighting_time is not None:
            return self.alighting_time - self.boarding_time
        return None

    def get_total_journey_time(self) -> Optional[int]:
        if self.alighting_time is not None:
            return self.alighting_time - self.arrival_time
        return None

    def get_time_until_give_up(self) -> Optional[int]:
        if self.gave_up_time is not None:
            return self.gave_up_time - self.arrival_time
        return None
