"""Simulation engine: frame clock, epoch loop, and epoch-log persistence."""

from ecofield.simulation.clock import Clock
from ecofield.simulation.engine import SimulationSummary, average_fps, run_simulation
from ecofield.simulation.persistence import flush_epoch_columns, new_epoch_columns

__all__ = [
    "Clock",
    "SimulationSummary",
    "average_fps",
    "flush_epoch_columns",
    "new_epoch_columns",
    "run_simulation",
]
