"""Tests for epidemic_abm.domain.population."""

from __future__ import annotations

from random import Random

import pytest

from epidemic_abm.config.types import EpidemicConfig
from epidemic_abm.domain.geometry import Location
from epidemic_abm.domain.population import Agent, Population
from epidemic_abm.domain.status import Status
from tests.helpers import ScriptedRandom


class TestPopulationCreate:
    def test_correct_agent_count(self) -> None:
        population = Population.create(EpidemicConfig(population_size=37), Random(0))
        assert len(population) == 37
        assert population.size == 37

    def test_agents_within_area(self) -> None:
        config = EpidemicConfig(population_size=200, width=30, height=20)
        population = Population.create(config, Random(1))
        for agent in population.agents:
            assert 0 <= agent.location.x < 30
            assert 0 <= agent.location.y < 20

    def test_only_susceptible_or_infected_initially(self) -> None:
        population = Population.create(EpidemicConfig(), Random(2))
        assert {a.status for a in population.agents} <= {Status.SUSCEPTIBLE, Status.INFECTED}

    def test_countdown_set_to_full_duration_for_everyone(self) -> None:
        config = EpidemicConfig(population_size=50, infection_duration=17)
        population = Population.create(config, Random(3))
        assert all(a.remaining_infection_days == 17 for a in population.agents)

    def test_initial_infection_uses_percentage_draw(self) -> None:
        # per agent: x, y, percentage draw; 4 < 5 infects, 5 does not
        rng = ScriptedRandom(randrange_values=[1, 2, 4, 3, 4, 5])
        config = EpidemicConfig(population_size=2, initial_infected_pct=5)
        population = Population.create(config, rng)
        assert population[0].location == Location(1, 2)
        assert population[0].status is Status.INFECTED
        assert population[1].location == Location(3, 4)
        assert population[1].status is Status.SUSCEPTIBLE

    def test_infected_share_is_roughly_five_percent(self) -> None:
        config = EpidemicConfig(population_size=4000)
        population = Population.create(config, Random(4))
        share = population.infected_count / len(population)
        assert 0.03 < share < 0.07

    def test_same_seed_same_population(self) -> None:
        config = EpidemicConfig(population_size=60)
        a = Population.create(config, Random(9))
        b = Population.create(config, Random(9))
        assert a.agents == b.agents


class TestRecount:
    def test_counters_sum_to_size(self) -> None:
        population = Population.create(EpidemicConfig(population_size=123), Random(0))
        assert sum(population.counters.values()) == 123

    def test_recount_reflects_mutation(self) -> None:
        agents = [Agent(Location(0, 0)) for _ in range(3)]
        population = Population(agents=agents)
        assert population.counters[Status.SUSCEPTIBLE] == 3
        agents[1].status = Status.DECEASED
        assert population.counters[Status.DECEASED] == 0
        population.recount()
        assert population.counters[Status.DECEASED] == 1
        assert population.counters[Status.SUSCEPTIBLE] == 2

    def test_every_status_present_in_counters(self) -> None:
        population = Population(agents=[Agent(Location(0, 0))])
        assert set(population.counters) == set(Status)

    def test_invalid_status_is_fatal(self) -> None:
        population = Population(agents=[Agent(Location(0, 0))])
        population.agents[0].status = 7  # type: ignore[assignment]
        with pytest.raises(AssertionError, match="invalid status"):
            population.recount()

    def test_size_change_is_fatal(self) -> None:
        population = Population(agents=[Agent(Location(0, 0))])
        population.agents.append(Agent(Location(1, 1)))
        with pytest.raises(AssertionError, match="population size changed"):
            population.recount()
