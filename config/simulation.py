"""
Simulation Configuration

Building layout, step timings of the elevator, traffic ranges and run control.
All times are integer tenths of a second (the unit of the simulation clock).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _require_int(name: str, value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _require_positive(name: str, value: int):
    _require_int(name, value)
    if value <= 0:
        raise ValueError(f"{name} must be positive")


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 5  # floors are numbered 0 .. num_floors - 1

    def __post_init__(self):
        _require_int("num_floors", self.num_floors)
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")


@dataclass
class ElevatorConfig:
    """Elevator specifications (motion and idle handling)"""
    home_floor: int = 2
    accelerate_time: int = 15       # E6 -> E7/E8
    up_floor_time: int = 51         # E7 travel per floor
    up_decelerate_time: int = 14    # E7 -> E2
    down_floor_time: int = 61       # E8 travel per floor
    down_decelerate_time: int = 23  # E8 -> E2
    inaction_time: int = 300        # E3 -> E9 watchdog
    dormant_wake_time: int = 20     # decision wakes E3/E6 from E1

    def __post_init__(self):
        _require_int("home_floor", self.home_floor)
        if self.home_floor < 0:
            raise ValueError("home_floor cannot be negative")
        for name in ("accelerate_time", "up_floor_time", "up_decelerate_time",
                     "down_floor_time", "down_decelerate_time", "inaction_time",
                     "dormant_wake_time"):
            _require_positive(name, getattr(self, name))


@dataclass
class DoorConfig:
    """Door specifications"""
    open_time: int = 20         # E3 -> E4
    close_delay: int = 76       # E3 -> E5
    transfer_time: int = 25     # one person in or out (E4 -> E4)
    flutter_time: int = 40      # E5 retry while people are moving
    close_time: int = 20        # E5 -> E6
    fast_close_delay: int = 25  # U5 -> E5 when the car was NEUTRAL

    def __post_init__(self):
        for name in ("open_time", "close_delay", "transfer_time", "flutter_time",
                     "close_time", "fast_close_delay"):
            _require_positive(name, getattr(self, name))


@dataclass
class TrafficConfig:
    """
    Traffic pattern configuration

    Random ranges are half-open: [min, max).
    If `script` is given, arrivals are replayed from it instead of being drawn.
    """
    min_give_up_time: int = 300    # 30 seconds
    max_give_up_time: int = 1200   # 2 minutes
    min_inter_time: int = 10       # 1 second
    max_inter_time: int = 900      # 90 seconds
    script: Optional[List[Dict[str, int]]] = None

    def __post_init__(self):
        _require_positive("min_give_up_time", self.min_give_up_time)
        _require_positive("min_inter_time", self.min_inter_time)
        _require_int("max_give_up_time", self.max_give_up_time)
        _require_int("max_inter_time", self.max_inter_time)
        if self.max_give_up_time <= self.min_give_up_time:
            raise ValueError("max_give_up_time must be greater than min_give_up_time")
        if self.max_inter_time <= self.min_inter_time:
            raise ValueError("max_inter_time must be greater than min_inter_time")

        if self.script is not None:
            required = {"origin", "destination", "give_up_time", "inter_time"}
            if not isinstance(self.script, list):
                raise ValueError("script must be a list of users")
            for index, item in enumerate(self.script):
                if not isinstance(item, dict):
                    raise ValueError(f"script entry {index} must be a mapping")
                missing = required - set(item)
                if missing:
                    raise ValueError(f"script entry {index} is missing {sorted(missing)}")
                for key in sorted(required):
                    _require_int(f"script entry {index}: {key}", item[key])
                if item["origin"] == item["destination"]:
                    raise ValueError(f"script entry {index}: destination must differ from origin")
                if item["give_up_time"] <= 0 or item["inter_time"] <= 0:
                    raise ValueError(f"script entry {index}: times must be positive")


@dataclass
class OutputConfig:
    """Where the results of a run go"""
    trace: bool = True                      # print the step table
    event_log: Optional[str] = None         # JSON Lines file
    trajectory_plot: Optional[str] = None   # PNG file
    metrics_summary: bool = True


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator, door, traffic and output settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    door: DoorConfig = field(default_factory=DoorConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Simulation control
    max_time: int = 10000  # stop after 1000 seconds
    random_seed: Optional[int] = None
    realtime_factor: float = 0.0  # 0.0 = as fast as possible, 1.0 = realtime

    def __post_init__(self):
        _require_positive("max_time", self.max_time)
        if self.random_seed is not None:
            _require_int("random_seed", self.random_seed)
        if isinstance(self.realtime_factor, bool) or not isinstance(self.realtime_factor, (int, float)):
            raise ValueError(f"realtime_factor must be a number, got {self.realtime_factor!r}")
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data) or {}

        building_data = sim_data.get('building') or {}
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 5)
        )

        elevator_data = sim_data.get('elevator') or {}
        elevator = ElevatorConfig(
            home_floor=elevator_data.get('home_floor', 2),
            accelerate_time=elevator_data.get('accelerate_time', 15),
            up_floor_time=elevator_data.get('up_floor_time', 51),
            up_decelerate_time=elevator_data.get('up_decelerate_time', 14),
            down_floor_time=elevator_data.get('down_floor_time', 61),
            down_decelerate_time=elevator_data.get('down_decelerate_time', 23),
            inaction_time=elevator_data.get('inaction_time', 300),
            dormant_wake_time=elevator_data.get('dormant_wake_time', 20)
        )

        door_data = sim_data.get('door') or {}
        door = DoorConfig(
            open_time=door_data.get('open_time', 20),
            close_delay=door_data.get('close_delay', 76),
            transfer_time=door_data.get('transfer_time', 25),
            flutter_time=door_data.get('flutter_time', 40),
            close_time=door_data.get('close_time', 20),
            fast_close_delay=door_data.get('fast_close_delay', 25)
        )

        traffic_data = sim_data.get('traffic') or {}
        traffic = TrafficConfig(
            min_give_up_time=traffic_data.get('min_give_up_time', 300),
            max_give_up_time=traffic_data.get('max_give_up_time', 1200),
            min_inter_time=traffic_data.get('min_inter_time', 10),
            max_inter_time=traffic_data.get('max_inter_time', 900),
            script=traffic_data.get('script')
        )

        output_data = sim_data.get('output') or {}
        output = OutputConfig(
            trace=output_data.get('trace', True),
            event_log=output_data.get('event_log'),
            trajectory_plot=output_data.get('trajectory_plot'),
            metrics_summary=output_data.get('metrics_summary', True)
        )

        return cls(
            building=building,
            elevator=elevator,
            door=door,
            traffic=traffic,
            output=output,
            max_time=sim_data.get('max_time', 10000),
            random_seed=sim_data.get('random_seed'),
            realtime_factor=sim_data.get('realtime_factor', 0.0)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result: Dict[str, Any] = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': {
                    'home_floor': self.elevator.home_floor,
                    'accelerate_time': self.elevator.accelerate_time,
                    'up_floor_time': self.elevator.up_floor_time,
                    'up_decelerate_time': self.elevator.up_decelerate_time,
                    'down_floor_time': self.elevator.down_floor_time,
                    'down_decelerate_time': self.elevator.down_decelerate_time,
                    'inaction_time': self.elevator.inaction_time,
                    'dormant_wake_time': self.elevator.dormant_wake_time
                },
                'door': {
                    'open_time': self.door.open_time,
                    'close_delay': self.door.close_delay,
                    'transfer_time': self.door.transfer_time,
                    'flutter_time': self.door.flutter_time,
                    'close_time': self.door.close_time,
                    'fast_close_delay': self.door.fast_close_delay
                },
                'traffic': {
                    'min_give_up_time': self.traffic.min_give_up_time,
                    'max_give_up_time': self.traffic.max_give_up_time,
                    'min_inter_time': self.traffic.min_inter_time,
                    'max_inter_time': self.traffic.max_inter_time
                },
                'output': {
                    'trace': self.output.trace,
                    'event_log': self.output.event_log,
                    'trajectory_plot': self.output.trajectory_plot,
                    'metrics_summary': self.output.metrics_summary
                },
                'max_time': self.max_time,
                'realtime_factor': self.realtime_factor
            }
        }

        if self.traffic.script is not None:
            result['simulation']['traffic']['script'] = [dict(item) for item in self.traffic.script]
        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        num_floors = self.building.num_floors
        if self.elevator.home_floor >= num_floors:
            raise ValueError(f"elevator.home_floor ({self.elevator.home_floor}) must be below building.num_floors ({num_floors})")

        if self.traffic.script is not None:
            for index, item in enumerate(self.traffic.script):
                for key in ("origin", "destination"):
                    if not (0 <= item[key] < num_floors):
                        raise ValueError(f"script entry {index}: {key} {item[key]} is outside floors 0..{num_floors - 1}")
