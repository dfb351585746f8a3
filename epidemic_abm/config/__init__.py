"""Configuration layer: constants and typed config dataclasses."""

from epidemic_abm.config.constants import (
    FLUSH_THRESHOLD,
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
from epidemic_abm.config.types import (
    EpidemicConfig,
    RunConfig,
    RunSummary,
    ScanBackend,
)

__all__ = [
    "EpidemicConfig",
    "FLUSH_THRESHOLD",
    "HEIGHT",
    "INFECTION_DURATION",
    "INFECTION_PROBABILITY_PCT",
    "INFECTION_PROXIMITY",
    "INITIAL_INFECTED_PCT",
    "MAX_DISPLACEMENT",
    "NORMAL_FATALITY_RATE_PCT",
    "NUM_STEPS",
    "PERCENT_SCALE",
    "POPULATION_SIZE",
    "RunConfig",
    "RunSummary",
    "SATURATED_FATALITY_RATE_PCT",
    "SATURATION_DIVISOR",
    "ScanBackend",
    "WIDTH",
]
