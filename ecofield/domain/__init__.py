"""Domain layer: cell kinds, predation table, random sources, and the field."""

from ecofield.domain.cell import SPAWNABLE_CELLS, Cell, random_cell
from ecofield.domain.field import NEIGHBOR_OFFSETS, Field
from ecofield.domain.random_source import RandomSource
from ecofield.domain.rules import COMBINATION_RULES, combine

__all__ = [
    "COMBINATION_RULES",
    "Cell",
    "Field",
    "NEIGHBOR_OFFSETS",
    "RandomSource",
    "SPAWNABLE_CELLS",
    "combine",
    "random_cell",
]
