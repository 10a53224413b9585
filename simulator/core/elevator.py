from config.simulation import DoorConfig, ElevatorConfig
from .call_registers import CallRegisters
from .car_manifest import CarManifest
from .effects import Cancel, Effects, Note, Reschedule, RescheduleImmediate
from .floor_queue_manager import FloorQueueManager
from .steps import Action, Continuation, Direction, ElevatorStep
from ..infrastructure.scheduling import SchedulingHandle


class Elevator:
    """
    The single car of the building and its steps E1-E9.

    Each step method updates the car and returns the effects it wants
    scheduled. Three independent activities run through three handles:
    `primary` (E1-E4, E6-E8), `doors` (E5) and `watchdog` (E9).

    Flags:
        d1: people are getting in or out
        d2: the car moved or opened its doors within the last inaction_time
        d3: doors are open and nobody is getting in or out
    """

    def __init__(self, floor_queues: FloorQueueManager, decision_strategy,
                 num_floors: int = 5, elevator_config: ElevatorConfig = None,
                 door_config: DoorConfig = None, name: str = "Elevator"):
        self.name = name
        self.num_floors = num_floors
        self.floor_queues = floor_queues
        self.decision_strategy = decision_strategy
        self.motion = elevator_config if elevator_config is not None else ElevatorConfig()
        self.door = door_config if door_config is not None else DoorConfig()

        self.home_floor = self.motion.home_floor
        if not (0 <= self.home_floor < num_floors):
            raise ValueError(f"Home floor {self.home_floor} is outside floors 0..{num_floors - 1}")

        self.floor = self.home_floor
        self.direction = Direction.NEUTRAL
        self.step = ElevatorStep.WAIT_FOR_CALL
        self.d1 = False
        self.d2 = False
        self.d3 = False

        self.calls = CallRegisters(num_floors)
        self.manifest = CarManifest()

        self.primary = SchedulingHandle(f"{name}/primary")
        self.doors = SchedulingHandle(f"{name}/doors")
        self.watchdog = SchedulingHandle(f"{name}/watchdog")

    def __repr__(self):
        return (f"Elevator(floor={self.floor}, direction={self.direction.name}, step={self.step.value}, "
                f"d1={self.d1}, d2={self.d2}, d3={self.d3})")

    def decide(self) -> Effects:
        return self.decision_strategy.decide(self)

    # ========================================
    # E1 - E9
    # ========================================

    def wait_for_call(self) -> Effects:
        """E1: sitting at home with the doors closed until the decision wakes us."""
        self.step = ElevatorStep.WAIT_FOR_CALL
        return [Note("E1", "Elevator dormant.")]

    def change_of_state(self) -> Effects:
        """E2: on arrival, reverse or neutralize once nothing is left ahead."""
        self.step = ElevatorStep.CHANGE_OF_STATE
        calls = self.calls

        if self.direction is Direction.GOING_UP and not calls.any_above(self.floor):
            self.direction = Direction.GOING_DOWN if calls.any_below(self.floor) else Direction.NEUTRAL
            calls.clear(self.floor)
        elif self.direction is Direction.GOING_DOWN and not calls.any_below(self.floor):
            self.direction = Direction.GOING_UP if calls.any_above(self.floor) else Direction.NEUTRAL
            calls.clear(self.floor)

        return [
            Note("E2", "Elevator stops."),
            RescheduleImmediate(self.primary, Continuation(Action.OPEN_DOORS)),
        ]

    def open_doors(self) -> Effects:
        """E3"""
        self.step = ElevatorStep.OPEN_DOORS
        self.d1 = True
        self.d2 = True
        return [
            Note("E3", "Elevator doors start to open."),
            Reschedule(self.watchdog, self.motion.inaction_time, Continuation(Action.SET_INACTION_INDICATOR)),
            Reschedule(self.doors, self.door.close_delay, Continuation(Action.CLOSE_DOORS)),
            Reschedule(self.primary, self.door.open_time, Continuation(Action.LET_PEOPLE_OUT_IN)),
        ]

    def let_people_out_in(self) -> Effects:
        """
        E4: one person at a time, people getting out before people getting in.

        The rider who boarded last gets out first; the queue boards in arrival order.
        """
        self.step = ElevatorStep.LET_PEOPLE_OUT_IN
        repeat = Reschedule(self.primary, self.door.transfer_time, Continuation(Action.LET_PEOPLE_OUT_IN))

        leaving = self.manifest.most_recent_bound_for(self.floor)
        if leaving is not None:
            return [
                Note("E4", f"Doors are open. User {leaving.id} about to exit."),
                RescheduleImmediate(leaving.process, Continuation(Action.ALIGHT, leaving)),
                repeat,
            ]

        entering = self.floor_queues.get_queue(self.floor).front()
        if entering is not None:
            return [
                Note("E4", f"Doors are open. User {entering.id} about to enter."),
                RescheduleImmediate(entering.process, Continuation(Action.BOARD, entering)),
                repeat,
            ]

        self.d1 = False
        self.d3 = True
        return [Note("E4", "Doors are open. Nobody outside elevator.")]

    def close_doors(self) -> Effects:
        """E5: independent door activity."""
        self.step = ElevatorStep.CLOSE_DOORS
        if self.d1:
            return [
                Note("E5", "Doors flutter."),
                Reschedule(self.doors, self.door.flutter_time, Continuation(Action.CLOSE_DOORS)),
            ]
        self.d3 = False
        return [
            Note("E5", "Elevator doors start to close."),
            Reschedule(self.primary, self.door.close_time, Continuation(Action.PREPARE_TO_MOVE)),
        ]

    def prepare_to_move(self) -> Effects:
        """E6"""
        self.step = ElevatorStep.PREPARE_TO_MOVE
        calls = self.calls
        calls.car[self.floor] = False
        # A car going up assumes nobody going down got in, and vice versa.
        if self.direction is not Direction.GOING_DOWN:
            calls.up[self.floor] = False
        if self.direction is not Direction.GOING_UP:
            calls.down[self.floor] = False

        effects = self.decide()

        if self.direction is Direction.NEUTRAL:
            effects += [
                Note("E6", "Elevator about to go dormant."),
                RescheduleImmediate(self.primary, Continuation(Action.WAIT_FOR_CALL)),
            ]
            return effects

        if self.d2:
            effects.append(Cancel(self.watchdog))
        if self.direction is Direction.GOING_UP:
            effects += [
                Note("E6", "Elevator about to go up."),
                Reschedule(self.primary, self.motion.accelerate_time, Continuation(Action.GO_UP_A_FLOOR)),
            ]
        else:
            effects += [
                Note("E6", "Elevator about to go down."),
                Reschedule(self.primary, self.motion.accelerate_time, Continuation(Action.GO_DOWN_A_FLOOR)),
            ]
        return effects

    def go_up_a_floor(self) -> Effects:
        """E7, first half: travel to the next floor up."""
        self.step = ElevatorStep.GO_UP_A_FLOOR
        self.floor += 1
        return [
            Note("E7", f"Elevator moving up to floor {self.floor}."),
            Reschedule(self.primary, self.motion.up_floor_time, Continuation(Action.FINISH_GOING_UP)),
        ]

    def finish_going_up(self) -> Effects:
        """E7, second half: stop here or keep climbing."""
        calls = self.calls
        if calls.car[self.floor] or calls.up[self.floor] or (
                (self.floor == self.home_floor or calls.down[self.floor]) and not calls.any_above(self.floor)):
            return [Reschedule(self.primary, self.motion.up_decelerate_time, Continuation(Action.CHANGE_OF_STATE))]
        return [RescheduleImmediate(self.primary, Continuation(Action.GO_UP_A_FLOOR))]

    def go_down_a_floor(self) -> Effects:
        """E8, first half: travel to the next floor down."""
        self.step = ElevatorStep.GO_DOWN_A_FLOOR
        self.floor -= 1
        return [
            Note("E8", f"Elevator moving down to floor {self.floor}."),
            Reschedule(self.primary, self.motion.down_floor_time, Continuation(Action.FINISH_GOING_DOWN)),
        ]

    def finish_going_down(self) -> Effects:
        """E8, second half: stop here or keep descending."""
        calls = self.calls
        if calls.car[self.floor] or calls.down[self.floor] or (
                (self.floor == self.home_floor or calls.up[self.floor]) and not calls.any_below(self.floor)):
            return [Reschedule(self.primary, self.motion.down_decelerate_time, Continuation(Action.CHANGE_OF_STATE))]
        return [RescheduleImmediate(self.primary, Continuation(Action.GO_DOWN_A_FLOOR))]

    def set_inaction_indicator(self) -> Effects:
        """E9: independent watchdog, the doors have been open too long."""
        self.d2 = False
        return [Note("E9", "Elevator not active.")] + self.decide()
