"""Visualization theme presets for population and history renderers.

The status colour table lives here rather than in the domain layer; the core
only knows status labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from epidemic_abm.domain.status import Status


def _default_status_colors() -> dict[Status, str]:
    return {
        Status.SUSCEPTIBLE: "#FFFFFF",
        Status.INFECTED: "#E62937",
        Status.IMMUNE: "#00E430",
        Status.DECEASED: "#000000",
    }


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    status_colors: dict[Status, str] = field(default_factory=_default_status_colors)
    background_color: str = "#0079F1"
    history_color: str = "#E62937"
    finished_text_color: str = "#E62937"
    marker_size: float = 9.0


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    status_colors={
        Status.SUSCEPTIBLE: "#9E9E9E",
        Status.INFECTED: "#d62728",
        Status.IMMUNE: "#2ca02c",
        Status.DECEASED: "#000000",
    },
    background_color="#FFFFFF",
    history_color="#d62728",
    finished_text_color="#333333",
    marker_size=6.0,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
