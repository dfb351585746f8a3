"""Typed read views of a population for renderers and reports.

``AgentView`` is the per-agent record exposed to collaborators that draw or
print the simulation; they never touch live ``Agent`` objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from epidemic_abm.domain.population import Population
from epidemic_abm.domain.status import Status


@dataclass(frozen=True)
class AgentView:
    """Immutable view of a single agent at one tick."""

    agent_id: int
    x: int
    y: int
    status: Status


Snapshot = tuple[AgentView, ...]
"""Ordered agent views capturing the full population at one tick."""


def take_snapshot(population: Population) -> Snapshot:
    return tuple(
        AgentView(agent_id=i, x=agent.location.x, y=agent.location.y, status=agent.status)
        for i, agent in enumerate(population.agents)
    )


def format_status_report(snapshot: Snapshot) -> str:
    """One ``(x, y) - LABEL`` line per agent, in index order."""
    return "\n".join(f"({view.x}, {view.y}) - {view.status.label}" for view in snapshot)
