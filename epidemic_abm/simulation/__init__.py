"""Simulation engine: step driver, headless runner, and Parquet persistence."""

from epidemic_abm.simulation.engine import (
    RunState,
    Simulation,
    SimulationState,
    initialize,
    reset,
    step,
)
from epidemic_abm.simulation.persistence import flush_history_columns, write_run_summaries
from epidemic_abm.simulation.runner import run_batch, run_simulation

__all__ = [
    "RunState",
    "Simulation",
    "SimulationState",
    "flush_history_columns",
    "initialize",
    "reset",
    "run_batch",
    "run_simulation",
    "step",
    "write_run_summaries",
]
