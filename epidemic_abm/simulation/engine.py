"""Step driver: one owned simulation object advanced one tick at a time.

A tick runs four phases in order: the all-pairs contact scan (progression and
transmission applied per pair), movement with a full recount, the saturation
update, and the history append. Saturation computed at the end of a tick only
affects fatality on the following tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from random import Random

from epidemic_abm.config.types import EpidemicConfig
from epidemic_abm.domain.contacts import find_contacts
from epidemic_abm.domain.history import History
from epidemic_abm.domain.movement import move_population
from epidemic_abm.domain.population import Population, StatusCounters
from epidemic_abm.domain.snapshot import Snapshot, take_snapshot
from epidemic_abm.domain.transitions import apply_contact

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Lifecycle of a simulation between resets."""

    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class SimulationState:
    """Config plus everything a tick mutates, replaced as one object on reset."""

    config: EpidemicConfig
    population: Population
    history: History = field(default_factory=History)
    saturated: bool = False
    run_state: RunState = RunState.RUNNING
    tick: int = 0


def _fresh_state(config: EpidemicConfig, rng: Random) -> SimulationState:
    return SimulationState(config=config, population=Population.create(config, rng))


class Simulation:
    """Epidemic simulation with an injected random source.

    Readers (renderers, reporters) should go through the accessors; ``reset``
    swaps the whole state in one assignment so a reader never sees a
    half-reinitialised population.
    """

    def __init__(self, rng: Random, state: SimulationState) -> None:
        self.rng = rng
        self._state = state

    @classmethod
    def initialize(cls, config: EpidemicConfig, rng: Random) -> Simulation:
        """Build a fresh population and a history seeded with one zero sample."""
        return cls(rng, _fresh_state(config, rng))

    # -- accessors ---------------------------------------------------------

    @property
    def config(self) -> EpidemicConfig:
        return self._state.config

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def population(self) -> Population:
        return self._state.population

    @property
    def counters(self) -> StatusCounters:
        return dict(self._state.population.counters)

    @property
    def saturated(self) -> bool:
        return self._state.saturated

    @property
    def history(self) -> History:
        return self._state.history

    @property
    def run_state(self) -> RunState:
        return self._state.run_state

    @property
    def tick(self) -> int:
        return self._state.tick

    @property
    def is_finished(self) -> bool:
        return self._state.run_state is RunState.FINISHED

    def snapshot(self) -> Snapshot:
        return take_snapshot(self._state.population)

    # -- control -----------------------------------------------------------

    def step(self) -> bool:
        """Advance exactly one tick.

        Returns False without touching any state when the simulation is (or
        just became) finished.
        """
        state = self._state
        if state.run_state is RunState.FINISHED:
            return False
        if state.population.infected_count == 0:
            state.run_state = RunState.FINISHED
            logger.debug("simulation finished after %d ticks", state.tick)
            return False

        config = state.config
        agents = state.population.agents
        fatality_rate_pct = config.fatality_rate_pct(state.saturated)
        contacts = find_contacts(
            state.population.locations(), config.proximity_threshold, config.scan_backend
        )
        for i, j in contacts:
            apply_contact(
                agents[i],
                agents[j],
                fatality_rate_pct=fatality_rate_pct,
                infection_probability_pct=config.infection_probability_pct,
                infection_duration=config.infection_duration,
                rng=self.rng,
            )

        counters = move_population(state.population, config, self.rng)
        infected = state.population.infected_count
        state.saturated = infected >= config.saturation_threshold
        state.history.append(infected)
        state.tick += 1
        logger.debug(
            "tick %d: contacts=%d counters=%s saturated=%s",
            state.tick,
            len(contacts),
            {status.label: count for status, count in counters.items()},
            state.saturated,
        )
        return True

    def reset(self, rng: Random | None = None, config: EpidemicConfig | None = None) -> None:
        """Reinitialise population and history.

        A new random source or config may be supplied; the config is swapped in
        together with the fresh population.
        """
        if rng is not None:
            self.rng = rng
        self._state = _fresh_state(config if config is not None else self.config, self.rng)
        logger.debug("simulation reset (population=%d)", self.config.population_size)


# ---------------------------------------------------------------------------
# Function-style entrypoints
# ---------------------------------------------------------------------------


def initialize(config: EpidemicConfig, rng: Random) -> Simulation:
    return Simulation.initialize(config, rng)


def step(simulation: Simulation) -> bool:
    return simulation.step()


def reset(simulation: Simulation, config: EpidemicConfig, rng: Random | None = None) -> None:
    """Reinitialise *simulation*, adopting *config* for all later ticks."""
    simulation.reset(rng, config=config)
