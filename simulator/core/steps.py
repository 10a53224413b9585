"""
Step and continuation definitions

Pending work on the agenda is plain data: a Continuation names the action to
run and, for passenger actions, the passenger it runs for.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .passenger import Passenger


class Direction(Enum):
    """Lighted arrows inside the car"""
    GOING_UP = "U"
    GOING_DOWN = "D"
    NEUTRAL = "N"


class ElevatorStep(Enum):
    """Where the elevator's primary activity currently is"""
    WAIT_FOR_CALL = "E1"
    CHANGE_OF_STATE = "E2"
    OPEN_DOORS = "E3"
    LET_PEOPLE_OUT_IN = "E4"
    CLOSE_DOORS = "E5"
    PREPARE_TO_MOVE = "E6"
    GO_UP_A_FLOOR = "E7"
    GO_DOWN_A_FLOOR = "E8"
    SET_INACTION_INDICATOR = "E9"


class Action(Enum):
    """Everything that can sit on the agenda"""
    # Elevator
    WAIT_FOR_CALL = "wait_for_call"
    CHANGE_OF_STATE = "change_of_state"
    OPEN_DOORS = "open_doors"
    LET_PEOPLE_OUT_IN = "let_people_out_in"
    CLOSE_DOORS = "close_doors"
    PREPARE_TO_MOVE = "prepare_to_move"
    GO_UP_A_FLOOR = "go_up_a_floor"
    FINISH_GOING_UP = "finish_going_up"
    GO_DOWN_A_FLOOR = "go_down_a_floor"
    FINISH_GOING_DOWN = "finish_going_down"
    SET_INACTION_INDICATOR = "set_inaction_indicator"

    # Passenger
    ARRIVE = "arrive"
    SIGNAL_AND_WAIT = "signal_and_wait"
    ENTER_QUEUE = "enter_queue"
    GIVE_UP = "give_up"
    BOARD = "board"
    ALIGHT = "alight"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_passenger_action(self) -> bool:
        return self.label.startswith("U")


_LABELS = {
    Action.WAIT_FOR_CALL: "E1",
    Action.CHANGE_OF_STATE: "E2",
    Action.OPEN_DOORS: "E3",
    Action.LET_PEOPLE_OUT_IN: "E4",
    Action.CLOSE_DOORS: "E5",
    Action.PREPARE_TO_MOVE: "E6",
    Action.GO_UP_A_FLOOR: "E7",
    Action.FINISH_GOING_UP: "E7",
    Action.GO_DOWN_A_FLOOR: "E8",
    Action.FINISH_GOING_DOWN: "E8",
    Action.SET_INACTION_INDICATOR: "E9",
    Action.ARRIVE: "U1",
    Action.SIGNAL_AND_WAIT: "U2",
    Action.ENTER_QUEUE: "U3",
    Action.GIVE_UP: "U4",
    Action.BOARD: "U5",
    Action.ALIGHT: "U6",
}


@dataclass(frozen=True)
class Continuation:
    """An action waiting on the agenda, optionally bound to one passenger"""
    action: Action
    passenger: Optional["Passenger"] = None

    def __post_init__(self):
        needs_passenger = self.action.is_passenger_action and self.action is not Action.ARRIVE
        if needs_passenger and self.passenger is None:
            raise ValueError(f"{self.action.name} needs a passenger")
        if not needs_passenger and self.passenger is not None:
            raise ValueError(f"{self.action.name} does not take a passenger")

    def describe(self) -> str:
        if self.passenger is None:
            return f"{self.action.label} {self.action.value}"
        return f"{self.action.label} {self.action.value} (user {self.passenger.id})"
