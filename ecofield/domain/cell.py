"""Cell kinds that populate the field."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecofield.domain.random_source import RandomSource


class Cell(IntEnum):
    """One grid cell. Integer values double as the grid's storage codes."""

    DEAD = 0
    FOOD = 1
    PLANT = 2
    VIRUS = 3
    WATER = 4
    FUNGUS = 5


# Order fixes the mapping from random_int(1, 5) to a kind.
SPAWNABLE_CELLS: tuple[Cell, ...] = (
    Cell.PLANT,
    Cell.VIRUS,
    Cell.FOOD,
    Cell.WATER,
    Cell.FUNGUS,
)


def random_cell(type_rng: RandomSource) -> Cell:
    """Pick a uniformly random non-dead cell kind."""
    option = type_rng.random_int(1, len(SPAWNABLE_CELLS))
    return SPAWNABLE_CELLS[option - 1]
