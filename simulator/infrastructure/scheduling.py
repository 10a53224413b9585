"""
Scheduling handles

Every independent activity of an entity owns one handle. A handle references
at most one pending agenda entry, and rescheduling through it cancels that
entry before inserting the new one.
"""

from typing import Optional

from .agenda import Agenda, AgendaEntry
from ..core.effects import Cancel, Effect, Reschedule, RescheduleImmediate
from ..core.steps import Continuation


class SchedulingHandle:
    """One activity slot, e.g. the elevator's door-closing activity"""

    def __init__(self, name: str):
        self.name = name
        self.entry: Optional[AgendaEntry] = None

    @property
    def pending(self) -> bool:
        return self.entry is not None and self.entry.pending

    def __repr__(self):
        target = self.entry.describe() if self.pending else "idle"
        return f"SchedulingHandle({self.name!r}, {target})"


class Scheduler:
    """The only way handles reach the agenda"""

    def __init__(self, agenda: Agenda):
        self.agenda = agenda

    def reschedule(self, handle: SchedulingHandle, delay: int, action: Continuation) -> AgendaEntry:
        if delay < 0:
            raise ValueError(f"Negative delay {delay} for {handle.name}")
        self.agenda.cancel(handle.entry)
        handle.entry = self.agenda.insert_sorted(self.agenda.now + delay, action)
        return handle.entry

    def reschedule_immediate(self, handle: SchedulingHandle, action: Continuation) -> AgendaEntry:
        self.agenda.cancel(handle.entry)
        handle.entry = self.agenda.insert_immediate(action)
        return handle.entry

    def cancel(self, handle: SchedulingHandle):
        self.agenda.cancel(handle.entry)
        handle.entry = None

    def apply(self, effect: Effect):
        """Carry out one scheduling effect"""
        if isinstance(effect, Reschedule):
            self.reschedule(effect.handle, effect.delay, effect.action)
        elif isinstance(effect, RescheduleImmediate):
            self.reschedule_immediate(effect.handle, effect.action)
        elif isinstance(effect, Cancel):
            self.cancel(effect.handle)
        else:
            raise ValueError(f"Not a scheduling effect: {effect!r}")
