"""Configuration dataclasses and run result containers.

All frozen dataclasses that parameterise a simulation, a headless batch of
runs, and the per-run summary live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from epidemic_abm.config.constants import (
    HEIGHT,
    INFECTION_DURATION,
    INFECTION_PROBABILITY_PCT,
    INFECTION_PROXIMITY,
    INITIAL_INFECTED_PCT,
    MAX_DISPLACEMENT,
    NORMAL_FATALITY_RATE_PCT,
    NUM_STEPS,
    PERCENT_SCALE,
    POPULATION_SIZE,
    SATURATED_FATALITY_RATE_PCT,
    SATURATION_DIVISOR,
    WIDTH,
)
from epidemic_abm.domain.contacts import ScanBackend
from epidemic_abm.domain.status import PolicyFlags

# ScanBackend is re-exported so callers can import every config knob from here
__all__ = [
    "EpidemicConfig",
    "RunConfig",
    "RunSummary",
    "ScanBackend",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunSummary:
    """Top-level result for one headless simulation run."""

    run_id: str
    sim_seed: int
    ticks: int
    finished: bool
    susceptible: int
    infected: int
    immune: int
    deceased: int
    peak_infected: int
    peak_tick: int
    max_tick_delta: int
    saturated_ticks: int
    attack_rate: float


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


def _check_pct(value: int, name: str) -> None:
    if not 0 <= value <= PERCENT_SCALE:
        raise ValueError(f"{name} must be in [0, {PERCENT_SCALE}]")


@dataclass(frozen=True)
class EpidemicConfig:
    """Disease, geometry and policy parameters for one simulation."""

    population_size: int = POPULATION_SIZE
    width: int = WIDTH
    height: int = HEIGHT
    infection_duration: int = INFECTION_DURATION
    infection_probability_pct: int = INFECTION_PROBABILITY_PCT
    normal_fatality_rate_pct: int = NORMAL_FATALITY_RATE_PCT
    saturated_fatality_rate_pct: int = SATURATED_FATALITY_RATE_PCT
    proximity_threshold: float = INFECTION_PROXIMITY
    saturation_divisor: int = SATURATION_DIVISOR
    initial_infected_pct: int = INITIAL_INFECTED_PCT
    max_displacement: int = MAX_DISPLACEMENT
    policy: PolicyFlags = PolicyFlags.NONE
    scan_backend: ScanBackend = ScanBackend.NUMPY

    def __post_init__(self) -> None:
        if self.population_size < 1:
            raise ValueError("population_size must be >= 1")
        if self.width < 1 or self.height < 1:
            raise ValueError("area dimensions must be >= 1")
        if self.infection_duration < 1:
            raise ValueError("infection_duration must be >= 1")
        _check_pct(self.infection_probability_pct, "infection_probability_pct")
        _check_pct(self.normal_fatality_rate_pct, "normal_fatality_rate_pct")
        _check_pct(self.saturated_fatality_rate_pct, "saturated_fatality_rate_pct")
        _check_pct(self.initial_infected_pct, "initial_infected_pct")
        if self.proximity_threshold < 0:
            raise ValueError("proximity_threshold must be >= 0")
        if self.saturation_divisor < 1:
            raise ValueError("saturation_divisor must be >= 1")
        if self.max_displacement < 0:
            raise ValueError("max_displacement must be >= 0")

    @property
    def saturation_threshold(self) -> int:
        """Infected count at or above which the health system is saturated."""
        return self.population_size // self.saturation_divisor

    @property
    def isolation(self) -> bool:
        return PolicyFlags.ISOLATION in self.policy

    def fatality_rate_pct(self, saturated: bool) -> int:
        """Fatality chance to apply given the previous tick's saturation flag."""
        if saturated:
            return self.saturated_fatality_rate_pct
        return self.normal_fatality_rate_pct


@dataclass(frozen=True)
class RunConfig:
    """Settings for a seeded batch of headless runs."""

    n_runs: int = 1
    steps: int = NUM_STEPS
    sim_seed_start: int = 0
    out_dir: Path = Path("data")
    write_history: bool = True

    def __post_init__(self) -> None:
        if self.n_runs < 1:
            raise ValueError("n_runs must be >= 1")
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
