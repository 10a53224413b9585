"""Infrastructure components for simulation"""

from .agenda import Agenda, AgendaEntry, AgendaEmptyError, EntryStatus
from .scheduling import Scheduler, SchedulingHandle
from .realtime_env import RealtimeEnvironment

__all__ = [
    'Agenda',
    'AgendaEntry',
    'AgendaEmptyError',
    'EntryStatus',
    'Scheduler',
    'SchedulingHandle',
    'RealtimeEnvironment',
]
