"""Configuration layer: default constants and the typed run config."""

from ecofield.config.constants import (
    EAT_RATE,
    EXIT_CODE_INTERRUPTED,
    FLUSH_THRESHOLD,
    FPS_LIMIT,
    HEIGHT,
    SPAWN_RATE,
    WIDTH,
)
from ecofield.config.types import ConfigurationError, SimulationConfig

__all__ = [
    "ConfigurationError",
    "EAT_RATE",
    "EXIT_CODE_INTERRUPTED",
    "FLUSH_THRESHOLD",
    "FPS_LIMIT",
    "HEIGHT",
    "SPAWN_RATE",
    "SimulationConfig",
    "WIDTH",
]
