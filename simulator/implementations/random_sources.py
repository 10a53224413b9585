"""
Arrival sources

UniformRandomSource draws users the way the classic program does;
ScriptedRandomSource replays a fixed list.
"""

from typing import Iterable, List, Mapping, Optional, Union

import numpy as np

from config.simulation import TrafficConfig
from ..interfaces.random_source import ArrivalSpec, IRandomSource


class ScriptExhaustedError(LookupError):
    """A ScriptedRandomSource was asked for more users than it holds"""


class UniformRandomSource(IRandomSource):
    """
    Uniform arrivals

    - origin: any floor
    - destination: any other floor
    - give_up_time: [min_give_up_time, max_give_up_time)
    - inter_time: [min_inter_time, max_inter_time)

    Args:
        num_floors: Number of floors in the building
        traffic: Ranges (validated by TrafficConfig)
        seed: Seed for numpy's generator, None for a fresh one
    """

    def __init__(self, num_floors: int, traffic: Optional[TrafficConfig] = None, seed: Optional[int] = None):
        if num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        self.num_floors = num_floors
        self.traffic = traffic if traffic is not None else TrafficConfig()
        self.rng = np.random.default_rng(seed)

    def next_arrival(self) -> ArrivalSpec:
        origin = int(self.rng.integers(self.num_floors))
        # Draw among the other floors, then skip over the origin.
        destination = int(self.rng.integers(self.num_floors - 1))
        if destination >= origin:
            destination += 1

        traffic = self.traffic
        give_up_time = int(self.rng.integers(traffic.min_give_up_time, traffic.max_give_up_time))
        inter_time = int(self.rng.integers(traffic.min_inter_time, traffic.max_inter_time))
        return ArrivalSpec(origin, destination, give_up_time, inter_time)


class ScriptedRandomSource(IRandomSource):
    """
    Replays a fixed sequence of arrivals.

    The last entry's inter_time decides when the source is asked again; asking
    after the script has run out raises ScriptExhaustedError, so scripts should end with
    an inter_time beyond the end of the run.

    Usage:
        source = ScriptedRandomSource([
            {'origin': 2, 'destination': 4, 'give_up_time': 600, 'inter_time': 100000},
        ])
    """

    def __init__(self, arrivals: Iterable[Union[ArrivalSpec, Mapping[str, int]]]):
        self.arrivals: List[ArrivalSpec] = [
            item if isinstance(item, ArrivalSpec) else ArrivalSpec(
                origin=item['origin'],
                destination=item['destination'],
                give_up_time=item['give_up_time'],
                inter_time=item['inter_time'],
            )
            for item in arrivals
        ]
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self.arrivals) - self._position

    def next_arrival(self) -> ArrivalSpec:
        if self._position >= len(self.arrivals):
            raise ScriptExhaustedError(f"Arrival script exhausted after {len(self.arrivals)} users")
        spec = self.arrivals[self._position]
        self._position += 1
        return spec
