"""Parquet persistence helper for the epoch log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from ecofield.io.schemas import EPOCH_LOG_SCHEMA


def new_epoch_columns() -> dict[str, list[int | float]]:
    """Empty column buffers keyed by the epoch-log schema."""
    return {name: [] for name in EPOCH_LOG_SCHEMA.names}


def flush_epoch_columns(
    epoch_columns: dict[str, list[int | float]],
    epoch_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated epoch rows to Parquet and clear in-memory buffers."""
    if not epoch_columns["epoch"]:
        return writer
    table = pa.Table.from_pydict(epoch_columns, schema=EPOCH_LOG_SCHEMA)
    if writer is None:
        epoch_log_path.parent.mkdir(parents=True, exist_ok=True)
        writer = pq.ParquetWriter(epoch_log_path, EPOCH_LOG_SCHEMA)
    writer.write_table(table)
    for values in epoch_columns.values():
        values.clear()
    return writer
