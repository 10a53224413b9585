"""
Home Floor Decision

The DECISION subroutine of Knuth's elevator (TAOCP Vol. 1, 2.2.5):
an idle car goes to the lowest calling floor, and falls back to its home
floor when it is about to move with nothing to do.
"""

from simulator.core.effects import Effects, Reschedule
from simulator.core.steps import Action, Continuation, Direction, ElevatorStep
from ..interfaces.decision_strategy import IDecisionStrategy


class HomeFloorDecision(IDecisionStrategy):
    """
    Decision Logic:
    1. Not NEUTRAL: nothing to decide
    2. Dormant (E1) with a call on the home floor: open the doors after wake_time
    3. Target is the lowest floor other than the current one with a call.
       No such floor: target the home floor when preparing to move (E6),
       otherwise stay idle
    4. Direction towards the target
    5. Dormant (E1) and target is not home: prepare to move after wake_time

    Usage:
        strategy = HomeFloorDecision(wake_time=20)
        effects = strategy.decide(elevator)
    """

    def __init__(self, wake_time: int = 20):
        """
        Args:
            wake_time: Delay before a dormant elevator reacts (tenths of a second)
        """
        self.wake_time = wake_time

    def decide(self, elevator) -> Effects:
        if elevator.direction is not Direction.NEUTRAL:
            return []

        home = elevator.home_floor
        calls = elevator.calls
        dormant = elevator.step is ElevatorStep.WAIT_FOR_CALL

        if dormant and calls.any_at(home):
            return [Reschedule(elevator.primary, self.wake_time, Continuation(Action.OPEN_DOORS))]

        target = calls.lowest_call_except(elevator.floor)
        if target is None:
            if elevator.step is not ElevatorStep.PREPARE_TO_MOVE:
                return []
            target = home

        if elevator.floor > target:
            elevator.direction = Direction.GOING_DOWN
        elif elevator.floor < target:
            elevator.direction = Direction.GOING_UP

        if dormant and target != home:
            return [Reschedule(elevator.primary, self.wake_time, Continuation(Action.PREPARE_TO_MOVE))]
        return []

    def get_strategy_name(self) -> str:
        return "Home Floor (Knuth DECISION)"
