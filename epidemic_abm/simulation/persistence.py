"""Parquet persistence helpers for history and run-summary streams."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from epidemic_abm.config.types import RunSummary
from epidemic_abm.io.schemas import HISTORY_SCHEMA, RUN_SUMMARY_SCHEMA, RUN_SUMMARY_SCHEMA_VERSION


def flush_history_columns(
    history_columns: dict[str, list[int | str]],
    history_log_path: Path,
    history_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated history rows to Parquet and clear in-memory buffers."""
    if not history_columns["run_id"]:
        return history_writer
    table = pa.Table.from_pydict(history_columns, schema=HISTORY_SCHEMA)
    if history_writer is None:
        history_writer = pq.ParquetWriter(history_log_path, HISTORY_SCHEMA)
    history_writer.write_table(table)
    for values in history_columns.values():
        values.clear()
    return history_writer


def write_run_summaries(summaries: list[RunSummary], path: Path) -> None:
    rows = [
        {"schema_version": RUN_SUMMARY_SCHEMA_VERSION, **asdict(summary)} for summary in summaries
    ]
    table = pa.Table.from_pylist(rows, schema=RUN_SUMMARY_SCHEMA)
    pq.write_table(table, path)
