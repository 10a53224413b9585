"""
Effects returned by step functions

Steps never touch the agenda. They mutate the state they own and return a
list of effects; the simulation applies the effects in order.
"""

from dataclasses import dataclass
from typing import List, Union, TYPE_CHECKING

from .steps import Continuation

if TYPE_CHECKING:
    from ..infrastructure.scheduling import SchedulingHandle


@dataclass(frozen=True)
class Reschedule:
    """Run `action` after `delay` through `handle`, replacing its pending entry"""
    handle: "SchedulingHandle"
    delay: int
    action: Continuation


@dataclass(frozen=True)
class RescheduleImmediate:
    """Run `action` now, ahead of everything else pending, through `handle`"""
    handle: "SchedulingHandle"
    action: Continuation


@dataclass(frozen=True)
class Cancel:
    handle: "SchedulingHandle"


@dataclass(frozen=True)
class Note:
    """A line for the trace sinks, stamped with the state at the time it is applied"""
    label: str
    text: str


Effect = Union[Reschedule, RescheduleImmediate, Cancel, Note]
Effects = List[Effect]
