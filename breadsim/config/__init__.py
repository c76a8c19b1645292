#!filepath: breadsim/config/__init__.py

from .app_config import AppConfig
from .log_config import LogConfig
from .simulation_config import SimulationConfig, SimulationDefaults, acquire_config

__all__ = [
    "AppConfig",
    "LogConfig",
    "SimulationConfig",
    "SimulationDefaults",
    "acquire_config",
]
