"""Core simulation entities"""

from .steps import Action, Continuation, Direction, ElevatorStep
from .effects import Cancel, Note, Reschedule, RescheduleImmediate
from .passenger import Passenger
from .floor_queue_manager import FloorQueue, FloorQueueManager
from .car_manifest import CarManifest
from .call_registers import CallRegisters

__all__ = [
    'Action',
    'Continuation',
    'Direction',
    'ElevatorStep',
    'Cancel',
    'Note',
    'Reschedule',
    'RescheduleImmediate',
    'Passenger',
    'FloorQueue',
    'FloorQueueManager',
    'CarManifest',
    'CallRegisters',
]
