"""
Floor queues

One first-in-first-out line of waiting passengers per floor.
"""

from typing import Dict, Iterator, List, Optional

from .passenger import Passenger


class FloorQueue:
    """
    Passengers waiting at one floor, in arrival order.

    Backed by a dict keyed by passenger id: insertion order gives FIFO and
    removal of a passenger who gives up is O(1).
    """

    def __init__(self, floor: int):
        self.floor = floor
        self._members: Dict[int, Passenger] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Passenger]:
        return iter(list(self._members.values()))

    def __contains__(self, passenger: Passenger) -> bool:
        return self._members.get(passenger.id) is passenger

    def enqueue(self, passenger: Passenger):
        if passenger.container is not None:
            raise ValueError(f"{passenger.name} is already in {passenger.container!r}")
        self._members[passenger.id] = passenger
        passenger.container = self

    def front(self) -> Optional[Passenger]:
        return next(iter(self._members.values()), None)

    def remove(self, passenger: Passenger):
        if passenger not in self:
            raise ValueError(f"{passenger.name} is not waiting at floor {self.floor}")
        del self._members[passenger.id]
        passenger.container = None

    def __repr__(self):
        return f"FloorQueue(floor={self.floor}, waiting={[p.id for p in self._members.values()]})"


class FloorQueueManager:
    """
    The queues of every floor.

    Usage:
        queues = FloorQueueManager(num_floors=5)
        queues.get_queue(2).enqueue(passenger)
    """

    def __init__(self, num_floors: int):
        """
        Args:
            num_floors: Number of floors (0-indexed)
        """
        self.num_floors = num_floors
        self._queues: List[FloorQueue] = [FloorQueue(floor) for floor in range(num_floors)]

    def get_queue(self, floor: int) -> FloorQueue:
        """
        Raises:
            ValueError: If the floor does not exist
        """
        if floor < 0 or floor >= self.num_floors:
            raise ValueError(f"Floor {floor} is out of range (0-{self.num_floors - 1})")
        return self._queues[floor]

    def get_all_waiting_passengers(self, floor: Optional[int] = None) -> List[Passenger]:
        """Waiting passengers of one floor, or of the whole building"""
        if floor is not None:
            return list(self.get_queue(floor))
        return [passenger for queue in self._queues for passenger in queue]

    def waiting_counts(self) -> List[int]:
        return [len(queue) for queue in self._queues]
