"""
Agenda

The time-ordered list of pending actions ("wait list"), kept on the event heap
of a SimPy environment.

SimPy orders its heap by (time, priority, insertion id). Sorted insertions use
the NORMAL priority, so entries due at the same time fire in insertion order.
Immediate insertions use ever-decreasing negative priorities: they fire before
every sorted entry of the current instant, and the latest one fires first.

Cancellation is lazy. A cancelled entry stays on the heap until SimPy pops it,
and is skipped at that point.
"""

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import simpy
from simpy.core import EmptySchedule
from simpy.events import Event, NORMAL

from ..core.steps import Continuation


class AgendaEmptyError(RuntimeError):
    """Nothing is pending although the simulation is still running."""


class EntryStatus(Enum):
    PENDING = "pending"
    FIRED = "fired"
    CANCELLED = "cancelled"


@dataclass(eq=False)
class AgendaEntry:
    time: int
    action: Continuation
    priority: int
    seq: int
    status: EntryStatus = field(default=EntryStatus.PENDING)

    @property
    def immediate(self) -> bool:
        return self.priority < NORMAL

    @property
    def pending(self) -> bool:
        return self.status is EntryStatus.PENDING

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (self.time, self.priority, self.seq)

    def describe(self) -> str:
        mark = "!" if self.immediate else " "
        return f"{self.time:04d}{mark} {self.action.describe()}"


class _AgendaEvent(Event):
    """
    SimPy event carrying one agenda entry.

    Built the same way simpy.Timeout is, but with a caller-chosen priority.
    """

    def __init__(self, env: simpy.Environment, entry: AgendaEntry, delay: int):
        super().__init__(env)
        self._ok = True
        self._value = entry
        env.schedule(self, entry.priority, delay)


class Agenda:
    """
    Pending actions of the simulation, earliest first.

    Usage:
        agenda = Agenda()
        agenda.insert_sorted(agenda.now + 20, Continuation(Action.OPEN_DOORS))
        entry = agenda.pop_earliest()   # clock is now entry.time
    """

    def __init__(self, env: Optional[simpy.Environment] = None):
        """
        Args:
            env: SimPy environment that owns the clock and the heap.
                 A fresh simpy.Environment when omitted.
        """
        self.env = env if env is not None else simpy.Environment()
        self._seq = itertools.count()
        self._immediate_rank = itertools.count(1)
        self._live: Dict[int, AgendaEntry] = {}
        self._popped: Optional[AgendaEntry] = None

    @property
    def now(self) -> int:
        return self.env.now

    def __len__(self) -> int:
        return len(self._live)

    def is_empty(self) -> bool:
        return not self._live

    def insert_sorted(self, time: int, action: Continuation) -> AgendaEntry:
        """Insert at `time`, after every entry already due at or before `time`."""
        if time < self.now:
            raise ValueError(f"Cannot schedule {action.describe()} at {time}, clock is already at {self.now}")
        entry = AgendaEntry(time=time, action=action, priority=NORMAL, seq=next(self._seq))
        return self._push(entry)

    def insert_immediate(self, action: Continuation) -> AgendaEntry:
        """Insert at the current time, ahead of every other pending entry."""
        entry = AgendaEntry(time=self.now, action=action,
                            priority=-next(self._immediate_rank), seq=next(self._seq))
        return self._push(entry)

    def cancel(self, entry: Optional[AgendaEntry]):
        """Remove `entry` if it is still pending; no-op otherwise."""
        if entry is None or not entry.pending:
            return
        entry.status = EntryStatus.CANCELLED
        del self._live[entry.seq]

    def pop_earliest(self) -> AgendaEntry:
        """
        Remove the earliest pending entry and advance the clock to its time.

        Raises:
            AgendaEmptyError: If no entry is pending
        """
        while True:
            if not self._live:
                raise AgendaEmptyError(f"Agenda is empty at time {self.now}")
            try:
                self.env.step()
            except EmptySchedule:
                raise AgendaEmptyError(f"Agenda is empty at time {self.now}") from None

            entry, self._popped = self._popped, None
            if entry is not None:
                return entry

    def pending(self) -> List[AgendaEntry]:
        """Pending entries in the order they will fire."""
        return sorted(self._live.values(), key=lambda entry: entry.sort_key)

    def _push(self, entry: AgendaEntry) -> AgendaEntry:
        event = _AgendaEvent(self.env, entry, entry.time - self.now)
        event.callbacks.append(self._on_due)
        self._live[entry.seq] = entry
        return entry

    def _on_due(self, event: Event):
        entry = event.value
        if not entry.pending:
            return
        entry.status = EntryStatus.FIRED
        del self._live[entry.seq]
        self._popped = entry
