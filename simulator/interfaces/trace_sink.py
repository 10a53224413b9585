"""
Trace Sink Interface

Receives one record per traced step, stamped with the elevator state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TraceRecord:
    time: int
    direction: str  # "U", "D" or "N"
    floor: int
    d1: bool
    d2: bool
    d3: bool
    step: str       # "E1".."E9", "U1".."U6"
    text: str

    def to_dict(self) -> dict:
        return {
            'time': self.time,
            'direction': self.direction,
            'floor': self.floor,
            'd1': self.d1,
            'd2': self.d2,
            'd3': self.d3,
            'step': self.step,
            'text': self.text,
        }


class ITraceSink(ABC):
    """
    Interface for trace consumers

    Formatting and storage are up to the sink; the simulation only promises
    that the state in each record is accurate at the time it is emitted.
    """

    @abstractmethod
    def record(self, record: TraceRecord):
        pass
