"""Rectangular cell field with neighbor-predation dynamics.

Sweep invariant: cells are processed in row-major order against a single
grid that is written in place. A neighbor rewritten earlier in the sweep is
seen with its new value by every later cell.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from ecofield.config.types import ConfigurationError, validate_dimensions, validate_rate
from ecofield.domain.cell import Cell, random_cell
from ecofield.domain.random_source import RandomSource
from ecofield.domain.rules import combine

if TYPE_CHECKING:
    from ecofield.config.types import SimulationConfig

# Orthogonal neighbor offsets (row, col): N, E, S, W
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Field:
    """Dense (height, width) grid of cells plus the generators driving it."""

    cells: np.ndarray  # (height, width) uint8 of Cell values
    eat_rate: float
    spawn_rate: float
    rng: RandomSource = field(default_factory=RandomSource)
    type_rng: RandomSource = field(default_factory=RandomSource)

    def __post_init__(self) -> None:
        if self.cells.ndim != 2:
            raise ConfigurationError("cells must be a 2-D grid")
        validate_dimensions(int(self.cells.shape[0]), int(self.cells.shape[1]))
        validate_rate(self.eat_rate, "eat_rate")
        validate_rate(self.spawn_rate, "spawn_rate")

    @classmethod
    def blank(
        cls,
        config: SimulationConfig,
        rng: RandomSource | None = None,
        type_rng: RandomSource | None = None,
    ) -> Field:
        """All-dead field of the configured size."""
        return cls(
            cells=np.full((config.height, config.width), Cell.DEAD, dtype=np.uint8),
            eat_rate=config.eat_rate,
            spawn_rate=config.spawn_rate,
            rng=rng if rng is not None else RandomSource(config.seed),
            type_rng=type_rng if type_rng is not None else RandomSource(config.type_seed),
        )

    @classmethod
    def create(
        cls,
        config: SimulationConfig,
        rng: RandomSource | None = None,
        type_rng: RandomSource | None = None,
    ) -> Field:
        """Field with every cell drawn uniformly from the non-dead kinds."""
        world = cls.blank(config, rng, type_rng)
        for row in range(world.height):
            for col in range(world.width):
                world.cells[row, col] = random_cell(world.type_rng)
        return world

    @classmethod
    def from_rows(
        cls,
        rows: list[list[Cell]],
        eat_rate: float,
        spawn_rate: float,
        rng: RandomSource | None = None,
        type_rng: RandomSource | None = None,
    ) -> Field:
        """Build a field from explicit rows of cells; rows must share one length."""
        if not rows or len({len(r) for r in rows}) != 1:
            raise ConfigurationError("rows must be non-empty and of equal length")
        return cls(
            cells=np.array([[int(c) for c in r] for r in rows], dtype=np.uint8),
            eat_rate=eat_rate,
            spawn_rate=spawn_rate,
            rng=rng if rng is not None else RandomSource(),
            type_rng=type_rng if type_rng is not None else RandomSource(),
        )

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.height}x{self.width} field")
        return Cell(int(self.cells[row, col]))

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.height}x{self.width} field")
        self.cells[row, col] = int(cell)

    def rows(self) -> Iterator[list[Cell]]:
        """Yield rows top to bottom, each as a list of cells left to right."""
        for row in self.cells:
            yield [Cell(int(value)) for value in row]

    def __iter__(self) -> Iterator[list[Cell]]:
        return self.rows()

    def to_lists(self) -> list[list[Cell]]:
        return list(self.rows())

    def process_cell(self, row: int, col: int) -> None:
        """Let the cell at (row, col) try to eat each in-bounds neighbor.

        The eating cell itself is never changed. Missing neighbors at the
        field edge are skipped without a draw.
        """
        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if not self.in_bounds(n_row, n_col):
                continue
            if self.rng.chance(self.eat_rate):
                self.cells[n_row, n_col] = combine(
                    Cell(int(self.cells[row, col])),
                    Cell(int(self.cells[n_row, n_col])),
                )

    def process_all_cells(self) -> None:
        """Advance one epoch: row-major in-place sweep, then maybe one spawn."""
        for row in range(self.height):
            for col in range(self.width):
                self.process_cell(row, col)
        if self.rng.chance(self.spawn_rate):
            self.spawn_random_cell()

    def spawn_random_cell(self) -> tuple[int, int, Cell]:
        """Overwrite one uniformly chosen position with a random non-dead kind."""
        row = self.rng.random_int(0, self.height - 1)
        col = self.rng.random_int(0, self.width - 1)
        cell = random_cell(self.type_rng)
        self.cells[row, col] = cell
        return row, col, cell

    def population(self) -> dict[Cell, int]:
        """Count of cells per kind, every kind present as a key."""
        counts = np.bincount(self.cells.ravel(), minlength=len(Cell))
        return {cell: int(counts[cell]) for cell in Cell}
