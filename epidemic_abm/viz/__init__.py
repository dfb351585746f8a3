"""Visualization layer: themes and matplotlib renderers."""

from epidemic_abm.viz.render import (
    FINISHED_MESSAGE,
    render_animation,
    render_history,
    render_population,
    render_summary_figure,
)
from epidemic_abm.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "FINISHED_MESSAGE",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_animation",
    "render_history",
    "render_population",
    "render_summary_figure",
]
