"""Tests for read-only population views and the status report."""

from __future__ import annotations

import dataclasses

import pytest

from epidemic_abm.domain.geometry import Location
from epidemic_abm.domain.population import Agent, Population
from epidemic_abm.domain.snapshot import AgentView, format_status_report, take_snapshot
from epidemic_abm.domain.status import Status


def _population() -> Population:
    return Population(
        agents=[
            Agent(Location(1, 2), Status.SUSCEPTIBLE),
            Agent(Location(30, 40), Status.DECEASED),
        ]
    )


def test_snapshot_lists_agents_in_order() -> None:
    snapshot = take_snapshot(_population())
    assert snapshot == (
        AgentView(agent_id=0, x=1, y=2, status=Status.SUSCEPTIBLE),
        AgentView(agent_id=1, x=30, y=40, status=Status.DECEASED),
    )


def test_snapshot_is_immutable() -> None:
    view = take_snapshot(_population())[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.x = 5  # type: ignore[misc]


def test_status_report_format() -> None:
    report = format_status_report(take_snapshot(_population()))
    assert report.splitlines() == ["(1, 2) - SUSCEPTIBLE", "(30, 40) - DECEASED"]
