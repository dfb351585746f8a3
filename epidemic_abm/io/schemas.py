"""Parquet schema definitions for headless run artifacts.

Every module that writes or reads run outputs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

RUN_SUMMARY_SCHEMA_VERSION = 1

HISTORY_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("step", pa.int64()),
        ("infected", pa.int64()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("sim_seed", pa.int64()),
        ("ticks", pa.int64()),
        ("finished", pa.bool_()),
        ("susceptible", pa.int64()),
        ("infected", pa.int64()),
        ("immune", pa.int64()),
        ("deceased", pa.int64()),
        ("peak_infected", pa.int64()),
        ("peak_tick", pa.int64()),
        ("max_tick_delta", pa.int64()),
        ("saturated_ticks", pa.int64()),
        ("attack_rate", pa.float64()),
    ]
)
