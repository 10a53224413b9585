"""Shared fixtures for the elevator simulation tests"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import matplotlib
matplotlib.use("Agg")

import pytest

from config.simulation import SimulationConfig, TrafficConfig
from controller.algorithms.home_floor_decision import HomeFloorDecision
from simulator.core.elevator import Elevator
from simulator.core.floor_queue_manager import FloorQueueManager
from simulator.interfaces.trace_sink import ITraceSink
from simulator.simulation import Simulation

NEVER = 100000  # inter_time of the last scripted user: nobody else comes


class RecordingTrace(ITraceSink):
    """Keeps every trace record for inspection"""

    def __init__(self):
        self.records = []

    def record(self, record):
        self.records.append(record)

    def steps(self):
        return [r.step for r in self.records]

    def find(self, step, text_fragment=""):
        return [r for r in self.records if r.step == step and text_fragment in r.text]

    def times(self):
        return [r.time for r in self.records]


def user(origin, destination, give_up_time=600, inter_time=NEVER):
    return {'origin': origin, 'destination': destination,
            'give_up_time': give_up_time, 'inter_time': inter_time}


@pytest.fixture
def trace():
    return RecordingTrace()


@pytest.fixture
def make_simulation(trace):
    """Build a Simulation replaying `users` (dicts as made by `user()`)"""
    def _make(users, max_time=2000, **config_kwargs):
        config = SimulationConfig(traffic=TrafficConfig(script=list(users)), max_time=max_time,
                                  **config_kwargs)
        return Simulation(config, trace_sinks=[trace])
    return _make


@pytest.fixture
def floor_queues():
    return FloorQueueManager(num_floors=5)


@pytest.fixture
def elevator(floor_queues):
    return Elevator(floor_queues, HomeFloorDecision(wake_time=20), num_floors=5)
