"""Tests for infection progression and transmission rules."""

from __future__ import annotations

from epidemic_abm.domain.geometry import Location
from epidemic_abm.domain.population import Agent
from epidemic_abm.domain.status import Status
from epidemic_abm.domain.transitions import (
    apply_contact,
    progress_infection,
    roll_pct,
    transmit,
)
from tests.helpers import ConstantRandom, ScriptedRandom


def _agent(status: Status, days: int = 10) -> Agent:
    return Agent(location=Location(0, 0), status=status, remaining_infection_days=days)


class TestRollPct:
    def test_zero_never_and_hundred_always(self) -> None:
        assert not roll_pct(ConstantRandom(randrange_value=0), 0)
        assert roll_pct(ConstantRandom(randrange_value=99), 100)

    def test_strictly_below_rate(self) -> None:
        assert roll_pct(ConstantRandom(randrange_value=9), 10)
        assert not roll_pct(ConstantRandom(randrange_value=10), 10)


class TestProgressInfection:
    def test_decrements_infected(self) -> None:
        agent = _agent(Status.INFECTED, days=5)
        progress_infection(agent, 0, ConstantRandom())
        assert agent.remaining_infection_days == 4
        assert agent.status is Status.INFECTED

    def test_resolves_to_immune_without_fatality(self) -> None:
        agent = _agent(Status.INFECTED, days=1)
        progress_infection(agent, 0, ConstantRandom(randrange_value=0))
        assert agent.status is Status.IMMUNE

    def test_resolves_to_deceased_when_draw_below_rate(self) -> None:
        agent = _agent(Status.INFECTED, days=1)
        progress_infection(agent, 10, ConstantRandom(randrange_value=3))
        assert agent.status is Status.DECEASED

    def test_no_draw_before_countdown_expires(self) -> None:
        rng = ScriptedRandom()
        progress_infection(_agent(Status.INFECTED, days=3), 50, rng)
        assert rng.randrange_calls == 0

    def test_non_infected_untouched(self) -> None:
        for status in (Status.SUSCEPTIBLE, Status.IMMUNE, Status.DECEASED):
            agent = _agent(status, days=1)
            progress_infection(agent, 100, ConstantRandom())
            assert agent.status is status
            assert agent.remaining_infection_days == 1


class TestTransmit:
    def test_infects_susceptible_and_resets_countdown(self) -> None:
        target = _agent(Status.SUSCEPTIBLE, days=3)
        assert transmit(Status.INFECTED, target, 100, 200, ConstantRandom())
        assert target.status is Status.INFECTED
        assert target.remaining_infection_days == 200

    def test_probability_gate(self) -> None:
        target = _agent(Status.SUSCEPTIBLE)
        assert not transmit(Status.INFECTED, target, 50, 200, ConstantRandom(randrange_value=50))
        assert target.status is Status.SUSCEPTIBLE

    def test_immune_target_not_infected(self) -> None:
        target = _agent(Status.IMMUNE, days=0)
        assert not transmit(Status.INFECTED, target, 100, 200, ConstantRandom())
        assert target.status is Status.IMMUNE
        assert target.remaining_infection_days == 0

    def test_non_infected_source_does_nothing(self) -> None:
        target = _agent(Status.SUSCEPTIBLE)
        assert not transmit(Status.IMMUNE, target, 100, 200, ConstantRandom())


class TestApplyContact:
    _kwargs = {"fatality_rate_pct": 0, "infection_probability_pct": 100, "infection_duration": 50}

    def test_infected_exposes_susceptible_in_either_order(self) -> None:
        orders = ((Status.INFECTED, Status.SUSCEPTIBLE), (Status.SUSCEPTIBLE, Status.INFECTED))
        for first, second in orders:
            a, b = _agent(first), _agent(second)
            apply_contact(a, b, rng=ConstantRandom(), **self._kwargs)
            assert a.status is Status.INFECTED
            assert b.status is Status.INFECTED

    def test_newly_infected_side_not_progressed_in_same_contact(self) -> None:
        a, b = _agent(Status.INFECTED, days=10), _agent(Status.SUSCEPTIBLE, days=0)
        apply_contact(a, b, rng=ConstantRandom(), **self._kwargs)
        assert a.remaining_infection_days == 9
        assert b.remaining_infection_days == 50

    def test_agent_resolving_during_contact_still_exposes_partner(self) -> None:
        a, b = _agent(Status.INFECTED, days=1), _agent(Status.SUSCEPTIBLE)
        apply_contact(a, b, rng=ConstantRandom(), **self._kwargs)
        assert a.status is Status.IMMUNE
        assert b.status is Status.INFECTED

    def test_two_infected_both_progress(self) -> None:
        a, b = _agent(Status.INFECTED, days=4), _agent(Status.INFECTED, days=7)
        apply_contact(a, b, rng=ConstantRandom(), **self._kwargs)
        assert (a.remaining_infection_days, b.remaining_infection_days) == (3, 6)

    def test_deceased_and_immune_are_inert(self) -> None:
        a, b = _agent(Status.DECEASED, days=0), _agent(Status.IMMUNE, days=0)
        apply_contact(a, b, rng=ConstantRandom(), **self._kwargs)
        assert a.status is Status.DECEASED
        assert b.status is Status.IMMUNE

    def test_infected_never_returns_to_susceptible(self) -> None:
        a = _agent(Status.INFECTED, days=2)
        for _ in range(5):
            apply_contact(a, _agent(Status.SUSCEPTIBLE), rng=ConstantRandom(), **self._kwargs)
            assert a.status is not Status.SUSCEPTIBLE
        assert a.status is Status.IMMUNE
