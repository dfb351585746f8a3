"""Domain layer: geometry, agents, disease rules, movement and history."""

from epidemic_abm.domain.contacts import (
    ContactPair,
    ScanBackend,
    find_contacts,
    iter_contact_pairs,
)
from epidemic_abm.domain.geometry import Location, clamp, distance
from epidemic_abm.domain.status import STATUS_LABELS, PolicyFlags, Status

# Modules below import from epidemic_abm.config; keep them after the leaves above.
from epidemic_abm.domain.history import History  # noqa: I001
from epidemic_abm.domain.movement import is_mobile, move_agent, move_population
from epidemic_abm.domain.population import Agent, Population, StatusCounters
from epidemic_abm.domain.snapshot import AgentView, Snapshot, format_status_report, take_snapshot
from epidemic_abm.domain.transitions import apply_contact, progress_infection, transmit

__all__ = [
    "Agent",
    "AgentView",
    "ContactPair",
    "History",
    "Location",
    "PolicyFlags",
    "Population",
    "STATUS_LABELS",
    "ScanBackend",
    "Snapshot",
    "Status",
    "StatusCounters",
    "apply_contact",
    "clamp",
    "distance",
    "find_contacts",
    "format_status_report",
    "is_mobile",
    "iter_contact_pairs",
    "move_agent",
    "move_population",
    "progress_infection",
    "take_snapshot",
    "transmit",
]
