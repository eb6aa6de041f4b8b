"""Configuration dataclass and validation error for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass

from ecofield.config.constants import EAT_RATE, FPS_LIMIT, HEIGHT, SPAWN_RATE, WIDTH

__all__ = [
    "ConfigurationError",
    "SimulationConfig",
    "validate_dimensions",
    "validate_rate",
]


class ConfigurationError(ValueError):
    """Raised when simulation parameters violate their preconditions."""


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_dimensions(height: object, width: object) -> None:
    """Require positive integer grid dimensions."""
    if not _is_int(height) or height < 1:  # type: ignore[operator]
        raise ConfigurationError("height must be >= 1")
    if not _is_int(width) or width < 1:  # type: ignore[operator]
        raise ConfigurationError("width must be >= 1")


def validate_rate(value: object, name: str) -> None:
    """Require a probability in [0.0, 1.0]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number")
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be in [0.0, 1.0]")


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime knobs for one simulation run.

    ``seed`` drives the per-field generator (eat/spawn draws and spawn
    coordinates); ``type_seed`` drives the independent generator that picks
    spawned cell types. ``None`` seeds from OS entropy.
    """

    max_fps: int = FPS_LIMIT
    width: int = WIDTH
    height: int = HEIGHT
    eat_rate: float = EAT_RATE
    spawn_rate: float = SPAWN_RATE
    seed: int | None = None
    type_seed: int | None = None

    def __post_init__(self) -> None:
        if not _is_int(self.max_fps) or self.max_fps < 1:
            raise ConfigurationError("max_fps must be >= 1")
        validate_dimensions(self.height, self.width)
        validate_rate(self.eat_rate, "eat_rate")
        validate_rate(self.spawn_rate, "spawn_rate")

    @property
    def frame_interval(self) -> float:
        """Minimum spacing between epochs, in seconds."""
        return 1.0 / self.max_fps
