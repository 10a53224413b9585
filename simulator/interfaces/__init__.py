"""Interfaces of the collaborators around the simulation core"""

from .random_source import ArrivalSpec, IRandomSource
from .trace_sink import ITraceSink, TraceRecord

__all__ = [
    'ArrivalSpec',
    'IRandomSource',
    'ITraceSink',
    'TraceRecord',
]
