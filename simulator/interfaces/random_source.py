"""
Random Source Interface

Defines where new users come from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ArrivalSpec:
    """Everything U1 needs to know about a new user"""
    origin: int
    destination: int
    give_up_time: int  # patience, tenths of a second
    inter_time: int    # time until the next user arrives


class IRandomSource(ABC):
    """
    Interface for arrival generation

    The simulation core never draws random numbers itself; it asks the source
    once per arrival (step U1).

    Usage Examples:
    - Uniform: every floor equally likely, uniform patience and inter-arrival time
    - Scripted: replay a fixed list of users (scenarios, tests)
    """

    @abstractmethod
    def next_arrival(self) -> ArrivalSpec:
        """
        Returns:
            ArrivalSpec with destination != origin
        """
        pass
