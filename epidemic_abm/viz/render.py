"""Matplotlib-based rendering functions for simulation visualizations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import animation
from matplotlib.artist import Artist
from matplotlib.patches import Patch

from epidemic_abm.domain.snapshot import Snapshot
from epidemic_abm.domain.status import Status
from epidemic_abm.simulation.engine import Simulation
from epidemic_abm.viz.theme import DEFAULT_THEME, Theme

FINISHED_MESSAGE = "Simulation has finished"


def _snapshot_arrays(snapshot: Snapshot, theme: Theme) -> tuple[np.ndarray, list[str]]:
    """Return an (N, 2) coordinate array and per-agent colours."""
    coords = np.array([(view.x, view.y) for view in snapshot], dtype=float).reshape(-1, 2)
    colors = [theme.status_colors[view.status] for view in snapshot]
    return coords, colors


def _build_status_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=theme.status_colors[status], edgecolor="gray", label=status.label)
        for status in Status
    ]


def render_population(
    snapshot: Snapshot,
    ax: plt.Axes,
    width: int,
    height: int,
    finished: bool = False,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Draw every agent as a square marker on the simulation plane.

    Screen convention: the origin is the top-left corner.
    """
    ax.clear()
    coords, colors = _snapshot_arrays(snapshot, theme)
    ax.set_facecolor(theme.background_color)
    ax.scatter(coords[:, 0], coords[:, 1], c=colors, s=theme.marker_size, marker="s", linewidths=0)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_xticks([])
    ax.set_yticks([])
    if finished:
        ax.text(
            width / 2,
            height / 2,
            FINISHED_MESSAGE,
            color=theme.finished_text_color,
            fontsize=16,
            ha="center",
            va="center",
        )


def render_history(
    history: Sequence[int],
    ax: plt.Axes,
    population_size: int | None = None,
    saturation_threshold: int | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Plot the infected-count series, one point per tick."""
    ax.clear()
    series = list(history)
    ax.plot(range(len(series)), series, color=theme.history_color, linewidth=1.2)
    if saturation_threshold is not None:
        ax.axhline(saturation_threshold, color="gray", linestyle="--", linewidth=0.8)
    ax.set_xlabel("Tick")
    ax.set_ylabel("Infected")
    ax.set_xlim(0, max(len(series) - 1, 1))
    ax.set_ylim(0, population_size if population_size else max(series + [1]))


def render_summary_figure(
    simulation: Simulation, output: Path, theme: Theme = DEFAULT_THEME
) -> Path:
    """Save a population panel next to the history curve."""
    config = simulation.config
    fig, (ax_pop, ax_hist) = plt.subplots(1, 2, figsize=(12, 4.5))
    render_population(
        simulation.snapshot(),
        ax_pop,
        config.width,
        config.height,
        finished=simulation.is_finished,
        theme=theme,
    )
    ax_pop.legend(handles=_build_status_legend_handles(theme), loc="upper right", fontsize=7)
    render_history(
        simulation.history,
        ax_hist,
        population_size=config.population_size,
        saturation_threshold=config.saturation_threshold,
        theme=theme,
    )
    fig.tight_layout()
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=150)
    plt.close(fig)
    return output


def render_animation(
    simulation: Simulation,
    steps: int,
    output: Path,
    fps: int = 10,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Advance *simulation* one tick per frame and write a GIF.

    The first frame shows the current state; frames keep drawing after the
    simulation finishes so the final distribution stays visible.
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")
    if fps < 1:
        raise ValueError("fps must be >= 1")
    config = simulation.config
    fig, (ax_pop, ax_hist) = plt.subplots(1, 2, figsize=(12, 4.5))

    def update(frame: int) -> list[Artist]:
        if frame > 0:
            simulation.step()
        render_population(
            simulation.snapshot(),
            ax_pop,
            config.width,
            config.height,
            finished=simulation.is_finished,
            theme=theme,
        )
        ax_pop.set_title(f"Tick {simulation.tick}")
        render_history(
            simulation.history,
            ax_hist,
            population_size=config.population_size,
            saturation_threshold=config.saturation_threshold,
            theme=theme,
        )
        return [*ax_pop.get_children(), *ax_hist.get_children()]

    anim = animation.FuncAnimation(fig, update, frames=steps + 1, blit=False, repeat=False)
    output.parent.mkdir(parents=True, exist_ok=True)
    anim.save(output, writer=animation.PillowWriter(fps=fps))
    plt.close(fig)
    return output
