"""Concrete collaborators: arrival sources and trace output"""

from .random_sources import ScriptExhaustedError, UniformRandomSource, ScriptedRandomSource
from .console_trace import ConsoleTrace

__all__ = [
    'UniformRandomSource',
    'ScriptedRandomSource',
    'ScriptExhaustedError',
    'ConsoleTrace',
]
