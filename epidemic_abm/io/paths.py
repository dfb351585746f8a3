"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def history_log_path(out_dir: Path) -> Path:
    """Return path to the infected-count history Parquet file."""
    return logs_dir(out_dir) / "history_log.parquet"


def run_summary_path(out_dir: Path) -> Path:
    """Return path to the per-run summary Parquet file."""
    return logs_dir(out_dir) / "run_summary.parquet"
