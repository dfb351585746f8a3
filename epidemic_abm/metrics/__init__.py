"""Summary metrics over infected-count series and status counters."""

from epidemic_abm.metrics.temporal import attack_rate, max_tick_delta, peak_infected

__all__ = ["attack_rate", "max_tick_delta", "peak_infected"]
