"""Random-walk movement with the isolation policy."""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING

from epidemic_abm.domain.population import Agent, Population, StatusCounters
from epidemic_abm.domain.status import Status

if TYPE_CHECKING:
    from epidemic_abm.config.types import EpidemicConfig


def is_mobile(agent: Agent, isolation: bool) -> bool:
    """Deceased agents never move; under isolation neither do Infected ones."""
    if agent.status is Status.DECEASED:
        return False
    return not (isolation and agent.status is Status.INFECTED)


def move_agent(agent: Agent, config: EpidemicConfig, rng: Random) -> None:
    """Displace one agent by an independent draw per axis, clamped to the area."""
    d = config.max_displacement
    dx = rng.randint(-d, d)
    dy = rng.randint(-d, d)
    agent.location = agent.location.displaced(dx, dy, config.width, config.height)


def move_population(population: Population, config: EpidemicConfig, rng: Random) -> StatusCounters:
    """Move every mobile agent in index order, then recount statuses."""
    isolation = config.isolation
    for agent in population.agents:
        if is_mobile(agent, isolation):
            move_agent(agent, config, rng)
    return population.recount()
