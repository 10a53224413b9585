"""
Configuration management package

Provides the configuration classes of the elevator simulation and their YAML loader.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    DoorConfig,
    TrafficConfig,
    OutputConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'DoorConfig',
    'TrafficConfig',
    'OutputConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
