"""
Configuration loader utility

Reads and writes SimulationConfig as YAML, and finds the bundled scenarios
under config/scenarios/ by name.
"""

import yaml
from pathlib import Path
from typing import List, Union

from .simulation import SimulationConfig

SCENARIO_DIR = Path(__file__).resolve().parent / "scenarios"


class ConfigLoader:
    """Utility class for loading configuration files"""

    @staticmethod
    def resolve_scenario(name_or_path: Union[str, Path], scenario_dir: Union[str, Path] = SCENARIO_DIR) -> Path:
        """
        Turn a scenario name into a file path

        An existing path is returned as is; otherwise `name` is looked up as
        `<scenario_dir>/<name>.yaml` (the bundled scenarios by default).

        Raises:
            FileNotFoundError: If neither exists
        """
        path = Path(name_or_path)
        if path.exists():
            return path

        candidate = Path(scenario_dir) / path.name
        if candidate.suffix not in (".yaml", ".yml"):
            candidate = candidate.with_suffix(".yaml")
        if candidate.exists():
            return candidate

        raise FileNotFoundError(f"Config file not found: {name_or_path}")

    @staticmethod
    def list_scenarios(scenario_dir: Union[str, Path] = SCENARIO_DIR) -> List[str]:
        """Names of the scenario files in `scenario_dir`, sorted"""
        directory = Path(scenario_dir)
        if not directory.is_dir():
            return []
        return sorted(p.stem for p in directory.iterdir() if p.suffix in (".yaml", ".yml"))

    @staticmethod
    def load_simulation(file_path: Union[str, Path]) -> SimulationConfig:
        """
        Load SimulationConfig from a YAML file or a bundled scenario name

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a mapping or validation fails
        """
        path = ConfigLoader.resolve_scenario(file_path)

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")

        config = SimulationConfig.from_dict(data)
        config.validate()
        return config

    @staticmethod
    def save_simulation(config: SimulationConfig, file_path: Union[str, Path]):
        """Write `config` as YAML, creating parent directories"""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)


# Convenience functions
def load_simulation_config(file_path: Union[str, Path]) -> SimulationConfig:
    """Load SimulationConfig from YAML file or scenario name"""
    return ConfigLoader.load_simulation(file_path)


def save_simulation_config(config: SimulationConfig, file_path: Union[str, Path]):
    """Save SimulationConfig to YAML file"""
    ConfigLoader.save_simulation(config, file_path)
