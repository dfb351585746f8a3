"""Temporal metrics: epidemic peak, tick-over-tick change, attack rate."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from epidemic_abm.domain.status import Status


def peak_infected(series: Sequence[int]) -> tuple[int, int]:
    """Return (peak value, first index reaching it); (0, 0) for an empty series."""
    if not series:
        return 0, 0
    peak = max(series)
    return peak, series.index(peak)


def max_tick_delta(series: Sequence[int]) -> int:
    """Compute max absolute first-difference in a time series."""
    if len(series) < 2:
        return 0
    return max(abs(curr - prev) for prev, curr in zip(series, series[1:], strict=False))


def attack_rate(counters: Mapping[Status, int], population_size: int) -> float:
    """Share of the population that has left the Susceptible status."""
    if population_size < 1:
        return 0.0
    return (population_size - counters.get(Status.SUSCEPTIBLE, 0)) / population_size
