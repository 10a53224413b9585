"""
Elevator Simulator - Core simulation engine

This package provides the agenda, the single elevator with its
E1-E9 steps, and the users with their U1-U6 steps.

The Simulation driver lives in simulator.simulation.
"""

__version__ = "0.1.0"

from .core.elevator import Elevator
from .core.passenger import Passenger
from .core.steps import Action, Continuation, Direction, ElevatorStep

from .infrastructure.agenda import Agenda, AgendaEmptyError
from .infrastructure.scheduling import Scheduler, SchedulingHandle
from .infrastructure.realtime_env import RealtimeEnvironment

__all__ = [
    'Elevator',
    'Passenger',
    'Action',
    'Continuation',
    'Direction',
    'ElevatorStep',
    'Agenda',
    'AgendaEmptyError',
    'Scheduler',
    'SchedulingHandle',
    'RealtimeEnvironment',
]
