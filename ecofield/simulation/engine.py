"""Simulation loop: pace, sweep, render, repeat."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import pyarrow.parquet as pq

from ecofield.config.constants import FLUSH_THRESHOLD
from ecofield.config.types import ConfigurationError, SimulationConfig
from ecofield.domain.cell import Cell
from ecofield.domain.field import Field
from ecofield.io.schemas import POPULATION_COLUMNS
from ecofield.render.signals import install_termination_handler, restore_handlers
from ecofield.render.terminal import draw_field, draw_status, prepare_output
from ecofield.simulation.clock import Clock
from ecofield.simulation.persistence import flush_epoch_columns, new_epoch_columns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationSummary:
    """Outcome of a finite run."""

    epochs: int
    elapsed_seconds: float
    average_fps: float
    final_population: dict[Cell, int]


def average_fps(epoch: int, elapsed_seconds: float) -> float:
    """Epochs completed per second of wall time; 0.0 before any time passes."""
    if elapsed_seconds <= 0.0:
        return 0.0
    return epoch / elapsed_seconds


def _append_epoch_row(
    columns: dict[str, list[int | float]],
    epoch: int,
    elapsed_seconds: float,
    population: dict[Cell, int],
) -> None:
    columns["epoch"].append(epoch)
    columns["elapsed_seconds"].append(elapsed_seconds)
    for cell, name in zip(Cell, POPULATION_COLUMNS, strict=True):
        columns[name].append(population[cell])


def run_simulation(
    config: SimulationConfig,
    *,
    out: TextIO | None = None,
    max_epochs: int | None = None,
    epoch_log_path: Path | None = None,
    snapshot_path: Path | None = None,
    field: Field | None = None,
    clock: Clock | None = None,
    timer: Callable[[], float] = time.perf_counter,
    install_signals: bool = False,
) -> SimulationSummary:
    """Run epochs until ``max_epochs`` is reached, or forever when it is None.

    Each epoch ticks the clock, sweeps the field, then draws the frame and a
    status line to ``out``. Optionally appends per-epoch populations to a
    Parquet log and saves a PNG of the final field.
    """
    if max_epochs is not None and max_epochs < 0:
        raise ConfigurationError("max_epochs must be >= 0")
    out = out if out is not None else sys.stdout
    field = field if field is not None else Field.create(config)
    clock = clock if clock is not None else Clock(config.max_fps)

    logger.info(
        "Starting simulation: %dx%d field, eat_rate=%s, spawn_rate=%s, max_fps=%d",
        field.width,
        field.height,
        field.eat_rate,
        field.spawn_rate,
        config.max_fps,
    )

    previous_handlers = install_termination_handler(out) if install_signals else None
    epoch_columns = new_epoch_columns()
    writer: pq.ParquetWriter | None = None
    prepare_output(out)
    start = timer()
    epoch = 0
    try:
        while max_epochs is None or epoch < max_epochs:
            clock.tick()
            field.process_all_cells()
            draw_field(out, field)
            elapsed = timer() - start
            draw_status(out, epoch, average_fps(epoch, elapsed))
            if epoch_log_path is not None:
                _append_epoch_row(epoch_columns, epoch, elapsed, field.population())
                if len(epoch_columns["epoch"]) >= FLUSH_THRESHOLD:
                    writer = flush_epoch_columns(epoch_columns, epoch_log_path, writer)
                    logger.debug("Flushed epoch log through epoch %d", epoch)
            epoch += 1
    finally:
        if epoch_log_path is not None:
            writer = flush_epoch_columns(epoch_columns, epoch_log_path, writer)
            if writer is not None:
                writer.close()
        if previous_handlers is not None:
            restore_handlers(previous_handlers)

    elapsed = timer() - start
    summary = SimulationSummary(
        epochs=epoch,
        elapsed_seconds=elapsed,
        average_fps=average_fps(epoch, elapsed),
        final_population=field.population(),
    )
    if snapshot_path is not None:
        # Imported lazily so headless runs never load matplotlib.
        from ecofield.viz.render import render_field_snapshot

        render_field_snapshot(field, snapshot_path, title=f"Epoch {epoch}")
    logger.info("Finished %d epochs, average FPS %.1f", summary.epochs, summary.average_fps)
    return summary
