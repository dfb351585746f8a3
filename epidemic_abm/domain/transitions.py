"""Per-contact disease rules: infection progression and transmission.

Each in-contact pair runs :func:`apply_contact` once. An Infected agent with
several contacts in one tick is therefore progressed once per contact.
"""

from __future__ import annotations

from random import Random

from epidemic_abm.config.constants import PERCENT_SCALE
from epidemic_abm.domain.population import Agent
from epidemic_abm.domain.status import Status


def roll_pct(rng: Random, chance_pct: int) -> bool:
    """Return True with probability chance_pct / 100."""
    return rng.randrange(PERCENT_SCALE) < chance_pct


def progress_infection(agent: Agent, fatality_rate_pct: int, rng: Random) -> None:
    """Count one contact against an Infected agent and resolve it at zero."""
    if agent.status is not Status.INFECTED:
        return
    agent.remaining_infection_days -= 1
    if agent.remaining_infection_days <= 0:
        agent.status = Status.DECEASED if roll_pct(rng, fatality_rate_pct) else Status.IMMUNE


def transmit(
    source_status: Status,
    target: Agent,
    infection_probability_pct: int,
    infection_duration: int,
    rng: Random,
) -> bool:
    """Infect a Susceptible target exposed to an Infected source.

    Returns True when a transmission happened.
    """
    if source_status is not Status.INFECTED or target.status is not Status.SUSCEPTIBLE:
        return False
    if not roll_pct(rng, infection_probability_pct):
        return False
    target.status = Status.INFECTED
    target.remaining_infection_days = infection_duration
    return True


def apply_contact(
    a: Agent,
    b: Agent,
    *,
    fatality_rate_pct: int,
    infection_probability_pct: int,
    infection_duration: int,
    rng: Random,
) -> None:
    """Resolve one contact between two agents.

    Statuses are captured at the moment of contact. Both sides progress their
    infection first; transmission is then decided from the captured statuses,
    so an agent that resolves during this contact still exposes its partner.
    At most one direction applies.
    """
    status_a, status_b = a.status, b.status
    progress_infection(a, fatality_rate_pct, rng)
    progress_infection(b, fatality_rate_pct, rng)
    if status_a is Status.INFECTED and status_b is Status.SUSCEPTIBLE:
        transmit(status_a, b, infection_probability_pct, infection_duration, rng)
    elif status_b is Status.INFECTED and status_a is Status.SUSCEPTIBLE:
        transmit(status_b, a, infection_probability_pct, infection_duration, rng)
