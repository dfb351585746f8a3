"""Centralized domain constants for epidemic simulations.

Defaults mirror the reference desktop program: a 900x600 plane holding 500
agents. Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

WIDTH = 900
"""Default simulation area width."""

HEIGHT = 600
"""Default simulation area height."""

POPULATION_SIZE = 500
"""Default number of agents per simulation."""

INFECTION_DURATION = 200
"""Countdown assigned whenever an agent becomes Infected."""

INFECTION_PROBABILITY_PCT = 50
"""Per-contact transmission chance, in percent."""

NORMAL_FATALITY_RATE_PCT = 10
"""Chance an infection resolves to death, in percent."""

SATURATED_FATALITY_RATE_PCT = 20
"""Fatality chance while the health system is saturated, in percent."""

INFECTION_PROXIMITY = 50.0
"""Maximum distance at which two agents are in contact."""

SATURATION_DIVISOR = 5
"""Saturation holds while infected >= population_size // SATURATION_DIVISOR."""

INITIAL_INFECTED_PCT = 5
"""Chance an agent starts Infected at initialization, in percent."""

MAX_DISPLACEMENT = 5
"""Per-axis random displacement is drawn from [-MAX_DISPLACEMENT, MAX_DISPLACEMENT]."""

PERCENT_SCALE = 100
"""Percentage draws are integers in [0, PERCENT_SCALE)."""

NUM_STEPS = 2_000
"""Default tick cap for headless runs."""

FLUSH_THRESHOLD = 8_192
"""Flush history rows to Parquet once this in-memory row count is reached."""
