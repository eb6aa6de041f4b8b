"""Terminal cellular ecosystem: typed cells eating their neighbors."""

from ecofield.config.types import ConfigurationError, SimulationConfig
from ecofield.domain.cell import Cell
from ecofield.domain.field import Field
from ecofield.domain.random_source import RandomSource
from ecofield.domain.rules import combine
from ecofield.simulation.clock import Clock
from ecofield.simulation.engine import SimulationSummary, run_simulation

__all__ = [
    "Cell",
    "Clock",
    "ConfigurationError",
    "Field",
    "RandomSource",
    "SimulationConfig",
    "SimulationSummary",
    "combine",
    "run_simulation",
]

__version__ = "0.1.0"
