"""Tests for the simulation loop in ecofield.simulation.engine."""

from __future__ import annotations

import io
import signal
from pathlib import Path

import matplotlib
import pyarrow.parquet as pq
import pytest

from ecofield.config.constants import FLUSH_THRESHOLD
from ecofield.config.types import ConfigurationError, SimulationConfig
from ecofield.domain.cell import Cell
from ecofield.domain.field import Field
from ecofield.domain.random_source import RandomSource
from ecofield.io.schemas import EPOCH_LOG_SCHEMA, POPULATION_COLUMNS
from ecofield.render.terminal import CLEAR_SCREEN, CURSOR_HOME
from ecofield.simulation.clock import Clock
from ecofield.simulation.engine import average_fps, run_simulation

matplotlib.use("Agg")


class NoSleepClock(Clock):
    def __init__(self) -> None:
        super().__init__(1000, sleep=lambda seconds: None)
        self.ticks = 0

    def tick(self) -> float:
        self.ticks += 1
        return super().tick()


def _config(**overrides: object) -> SimulationConfig:
    params: dict[str, object] = {
        "max_fps": 1000,
        "width": 8,
        "height": 4,
        "seed": 11,
        "type_seed": 12,
    }
    params.update(overrides)
    return SimulationConfig(**params)  # type: ignore[arg-type]


def test_average_fps() -> None:
    assert average_fps(10, 2.0) == 5.0
    assert average_fps(3, 0.0) == 0.0


def test_runs_requested_epochs_and_ticks_each() -> None:
    clock = NoSleepClock()
    out = io.StringIO()
    summary = run_simulation(_config(), out=out, max_epochs=5, clock=clock)
    assert summary.epochs == 5
    assert clock.ticks == 5
    assert sum(summary.final_population.values()) == 32


def test_output_has_one_frame_and_status_per_epoch() -> None:
    out = io.StringIO()
    run_simulation(_config(), out=out, max_epochs=3, clock=NoSleepClock())
    text = out.getvalue()
    assert text.startswith("\x1b[3J" + CURSOR_HOME + CLEAR_SCREEN)
    assert text.count(CURSOR_HOME) == 1 + 3
    for epoch in range(3):
        assert f"Epoch: {epoch}, average FPS: " in text


def test_zero_epochs_draws_nothing() -> None:
    out = io.StringIO()
    summary = run_simulation(_config(), out=out, max_epochs=0, clock=NoSleepClock())
    assert summary.epochs == 0
    assert "Epoch:" not in out.getvalue()


def test_negative_epochs_rejected() -> None:
    with pytest.raises(ConfigurationError):
        run_simulation(_config(), out=io.StringIO(), max_epochs=-1)


def test_uses_supplied_field() -> None:
    field = Field.from_rows(
        [[Cell.VIRUS, Cell.FOOD, Cell.FOOD]],
        eat_rate=1.0,
        spawn_rate=0.0,
        rng=RandomSource(0),
        type_rng=RandomSource(0),
    )
    summary = run_simulation(
        _config(), out=io.StringIO(), max_epochs=1, field=field, clock=NoSleepClock()
    )
    assert summary.final_population[Cell.VIRUS] == 3


def test_frozen_rates_leave_field_unchanged() -> None:
    config = _config(eat_rate=0.0, spawn_rate=0.0)
    field = Field.create(config)
    before = field.population()
    summary = run_simulation(
        config, out=io.StringIO(), max_epochs=10, field=field, clock=NoSleepClock()
    )
    assert summary.final_population == before


def test_epoch_log_written(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "epoch_log.parquet"
    run_simulation(
        _config(), out=io.StringIO(), max_epochs=6, epoch_log_path=log_path, clock=NoSleepClock()
    )
    table = pq.read_table(log_path)
    assert table.schema.names == EPOCH_LOG_SCHEMA.names
    assert table.column("epoch").to_pylist() == list(range(6))
    for row in table.to_pylist():
        assert sum(row[name] for name in POPULATION_COLUMNS) == 32
        assert row["n_dead"] == 0


def test_epoch_log_flushes_in_batches(tmp_path: Path) -> None:
    log_path = tmp_path / "epoch_log.parquet"
    epochs = FLUSH_THRESHOLD + 3
    run_simulation(
        _config(width=1, height=1),
        out=io.StringIO(),
        max_epochs=epochs,
        epoch_log_path=log_path,
        clock=NoSleepClock(),
    )
    parquet_file = pq.ParquetFile(log_path)
    assert parquet_file.metadata.num_rows == epochs
    assert parquet_file.num_row_groups == 2


def test_snapshot_written(tmp_path: Path) -> None:
    snapshot = tmp_path / "final.png"
    run_simulation(
        _config(), out=io.StringIO(), max_epochs=2, snapshot_path=snapshot, clock=NoSleepClock()
    )
    assert snapshot.exists()
    assert snapshot.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_signal_handlers_restored_after_run() -> None:
    before = signal.getsignal(signal.SIGTERM)
    run_simulation(
        _config(), out=io.StringIO(), max_epochs=1, clock=NoSleepClock(), install_signals=True
    )
    assert signal.getsignal(signal.SIGTERM) == before
