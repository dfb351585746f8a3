"""Health status vocabulary and policy flags for agents."""

from __future__ import annotations

from enum import Enum, Flag, auto
from types import MappingProxyType


class Status(Enum):
    """Disease status of a single agent."""

    SUSCEPTIBLE = 0
    INFECTED = 1
    IMMUNE = 2
    DECEASED = 3

    @property
    def is_active(self) -> bool:
        """Susceptible and Infected agents can still change outcome."""
        return self in (Status.SUSCEPTIBLE, Status.INFECTED)

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = MappingProxyType(
    {
        Status.SUSCEPTIBLE: "SUSCEPTIBLE",
        Status.INFECTED: "INFECTED",
        Status.IMMUNE: "IMMUNE",
        Status.DECEASED: "DECEASED",
    }
)
"""Read-only display label per status."""


class PolicyFlags(Flag):
    """Behavioral policies applied during the movement phase.

    Only ISOLATION is consulted. SOCIAL_DISTANCING is accepted and carried
    through configuration but has no effect on any phase.
    """

    NONE = 0
    ISOLATION = auto()
    SOCIAL_DISTANCING = auto()
