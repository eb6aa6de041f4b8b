"""Parquet schema for the per-epoch population log.

The column contract lives here so the writer and any reader agree on names
and types.
"""

from __future__ import annotations

import pyarrow as pa

from ecofield.domain.cell import Cell

EPOCH_LOG_SCHEMA_VERSION = 1

# One count column per cell kind, e.g. "n_plant"
POPULATION_COLUMNS: tuple[str, ...] = tuple(f"n_{cell.name.lower()}" for cell in Cell)

EPOCH_LOG_SCHEMA = pa.schema(
    [
        ("epoch", pa.int64()),
        ("elapsed_seconds", pa.float64()),
        *[(name, pa.int64()) for name in POPULATION_COLUMNS],
    ],
    metadata={"schema_version": str(EPOCH_LOG_SCHEMA_VERSION)},
)
