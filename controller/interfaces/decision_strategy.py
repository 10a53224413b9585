"""
Decision Strategy Interface

Defines how an idle (NEUTRAL) elevator chooses to start moving.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from simulator.core.effects import Effects

if TYPE_CHECKING:
    from simulator.core.elevator import Elevator


class IDecisionStrategy(ABC):
    """
    Interface for the decision taken at critical times

    Invoked when a call is registered while the elevator is idle, when the
    elevator prepares to move (E6) and when the inactivity watchdog fires (E9).

    Design Philosophy:
    - May change the elevator's direction
    - Never touches the agenda: scheduling is returned as effects
    """

    @abstractmethod
    def decide(self, elevator: "Elevator") -> Effects:
        """
        Take the elevator out of NEUTRAL if there is a reason to

        Args:
            elevator: The elevator, in whatever step it currently is

        Returns:
            Effects to apply (possibly empty)
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Returns:
            str: Strategy name (for logging and debugging)
        """
        pass
