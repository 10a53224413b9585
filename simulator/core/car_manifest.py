from typing import Dict, Iterator, Optional

from .passenger import Passenger


class CarManifest:
    """
    Passengers on board, examined most recently boarded first.

    Same dict-backed layout as FloorQueue; iteration runs from the top of the stack.
    """

    def __init__(self):
        self._members: Dict[int, Passenger] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Passenger]:
        return iter(list(reversed(self._members.values())))

    def __contains__(self, passenger: Passenger) -> bool:
        return self._members.get(passenger.id) is passenger

    def push(self, passenger: Passenger):
        if passenger.container is not None:
            raise ValueError(f"{passenger.name} is already in {passenger.container!r}")
        self._members[passenger.id] = passenger
        passenger.container = self

    def peek(self) -> Optional[Passenger]:
        return next(iter(self), None)

    def most_recent_bound_for(self, floor: int) -> Optional[Passenger]:
        for passenger in self:
            if passenger.destination == floor:
                return passenger
        return None

    def remove(self, passenger: Passenger):
        if passenger not in self:
            raise ValueError(f"{passenger.name} is not on board")
        del self._members[passenger.id]
        passenger.container = None

    def __repr__(self):
        return f"CarManifest(on_board={[p.id for p in self]})"
