"""Headless runs: step a simulation to completion and persist its history."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pyarrow.parquet as pq

from epidemic_abm.config.constants import FLUSH_THRESHOLD
from epidemic_abm.config.types import EpidemicConfig, RunConfig, RunSummary
from epidemic_abm.domain.status import Status
from epidemic_abm.io.paths import history_log_path, logs_dir, run_summary_path
from epidemic_abm.metrics.temporal import attack_rate, max_tick_delta, peak_infected
from epidemic_abm.simulation.engine import Simulation
from epidemic_abm.simulation.persistence import flush_history_columns, write_run_summaries

logger = logging.getLogger(__name__)


def _deterministic_run_id(sim_seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return f"run_ss{sim_seed}"


def run_simulation(
    config: EpidemicConfig,
    rng: random.Random,
    steps: int,
    run_id: str = "run",
    sim_seed: int = 0,
) -> tuple[Simulation, RunSummary]:
    """Step a fresh simulation until it finishes or *steps* ticks have run."""
    if steps < 1:
        raise ValueError("steps must be >= 1")
    simulation = Simulation.initialize(config, rng)
    saturated_ticks = 0
    for _ in range(steps):
        if not simulation.step():
            break
        if simulation.saturated:
            saturated_ticks += 1
    # A run that used the whole budget may have hit zero infected on its last tick
    if not simulation.is_finished and simulation.population.infected_count == 0:
        simulation.step()

    series = simulation.history.samples
    peak, peak_tick = peak_infected(series)
    counters = simulation.counters
    summary = RunSummary(
        run_id=run_id,
        sim_seed=sim_seed,
        ticks=simulation.tick,
        finished=simulation.is_finished,
        susceptible=counters[Status.SUSCEPTIBLE],
        infected=counters[Status.INFECTED],
        immune=counters[Status.IMMUNE],
        deceased=counters[Status.DECEASED],
        peak_infected=peak,
        peak_tick=peak_tick,
        max_tick_delta=max_tick_delta(series),
        saturated_ticks=saturated_ticks,
        attack_rate=attack_rate(counters, config.population_size),
    )
    return simulation, summary


def run_batch(config: EpidemicConfig, run_config: RunConfig) -> list[RunSummary]:
    """Run seeded simulations and persist history and summary Parquet logs."""
    out_dir = Path(run_config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    history_writer: pq.ParquetWriter | None = None
    history_columns: dict[str, list[int | str]] = {"run_id": [], "step": [], "infected": []}
    summaries: list[RunSummary] = []

    try:
        for i in range(run_config.n_runs):
            sim_seed = run_config.sim_seed_start + i
            run_id = _deterministic_run_id(sim_seed)
            simulation, summary = run_simulation(
                config,
                random.Random(sim_seed),
                run_config.steps,
                run_id=run_id,
                sim_seed=sim_seed,
            )
            summaries.append(summary)
            logger.info(
                "%s: ticks=%d finished=%s deceased=%d peak=%d",
                run_id,
                summary.ticks,
                summary.finished,
                summary.deceased,
                summary.peak_infected,
            )
            if not run_config.write_history:
                continue
            for step_index, infected in enumerate(simulation.history):
                history_columns["run_id"].append(run_id)
                history_columns["step"].append(step_index)
                history_columns["infected"].append(infected)
            if len(history_columns["run_id"]) >= FLUSH_THRESHOLD:
                history_writer = flush_history_columns(
                    history_columns, history_log_path(out_dir), history_writer
                )
        if run_config.write_history:
            history_writer = flush_history_columns(
                history_columns, history_log_path(out_dir), history_writer
            )
    finally:
        if history_writer is not None:
            history_writer.close()

    write_run_summaries(summaries, run_summary_path(out_dir))
    return summaries
