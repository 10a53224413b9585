from typing import List


class CallRegisters:
    """
    Hall call buttons (UP/DOWN) on every floor and the car buttons inside the elevator.

    A register is set when a person presses the button and cleared by the
    elevator once the request has been served.
    """

    def __init__(self, num_floors: int):
        self.num_floors = num_floors
        self.up: List[bool] = [False] * num_floors
        self.down: List[bool] = [False] * num_floors
        self.car: List[bool] = [False] * num_floors

    def any_at(self, floor: int) -> bool:
        return self.up[floor] or self.down[floor] or self.car[floor]

    def any_above(self, floor: int) -> bool:
        return any(self.any_at(j) for j in range(floor + 1, self.num_floors))

    def any_below(self, floor: int) -> bool:
        return any(self.any_at(j) for j in range(floor))

    def lowest_call_except(self, floor: int):
        """Smallest floor other than `floor` with any register set, or None"""
        for j in range(self.num_floors):
            if j != floor and self.any_at(j):
                return j
        return None

    def clear(self, floor: int):
        self.up[floor] = False
        self.down[floor] = False
        self.car[floor] = False
