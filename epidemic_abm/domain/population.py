"""Fixed-size agent population and its status counters.

Size is fixed at construction. Deceased agents stay in place as inert
members, so agent indices are stable for the lifetime of a population.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import TYPE_CHECKING

from epidemic_abm.config.constants import PERCENT_SCALE
from epidemic_abm.domain.geometry import Location
from epidemic_abm.domain.status import Status

if TYPE_CHECKING:
    from epidemic_abm.config.types import EpidemicConfig

StatusCounters = dict[Status, int]


def empty_counters() -> StatusCounters:
    return {status: 0 for status in Status}


@dataclass
class Agent:
    """A simulated individual.

    ``remaining_infection_days`` is only meaningful while Infected.
    """

    location: Location
    status: Status = Status.SUSCEPTIBLE
    remaining_infection_days: int = 0


@dataclass
class Population:
    """Ordered agents plus counters recomputed by :meth:`recount`."""

    agents: list[Agent]
    counters: StatusCounters = field(default_factory=empty_counters)

    def __post_init__(self) -> None:
        self._size = len(self.agents)
        self.recount()

    @classmethod
    def create(cls, config: EpidemicConfig, rng: Random) -> Population:
        """Place agents uniformly at random and seed the initial infections."""
        agents: list[Agent] = []
        for _ in range(config.population_size):
            location = Location(rng.randrange(config.width), rng.randrange(config.height))
            infected = rng.randrange(PERCENT_SCALE) < config.initial_infected_pct
            agents.append(
                Agent(
                    location=location,
                    status=Status.INFECTED if infected else Status.SUSCEPTIBLE,
                    remaining_infection_days=config.infection_duration,
                )
            )
        return cls(agents=agents)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Agent:
        return self.agents[index]

    @property
    def size(self) -> int:
        return self._size

    @property
    def infected_count(self) -> int:
        return self.counters[Status.INFECTED]

    def recount(self) -> StatusCounters:
        """Recompute counters from scratch with one pass over all agents."""
        if len(self.agents) != self._size:
            raise AssertionError(
                f"population size changed from {self._size} to {len(self.agents)}"
            )
        counters = empty_counters()
        for agent in self.agents:
            if not isinstance(agent.status, Status):
                raise AssertionError(f"agent holds invalid status {agent.status!r}")
            counters[agent.status] += 1
        self.counters = counters
        return counters

    def locations(self) -> list[Location]:
        return [agent.location for agent in self.agents]
