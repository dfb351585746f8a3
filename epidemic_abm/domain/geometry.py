"""Integer plane locations and Euclidean distance."""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp(value: int, low: int, high: int) -> int:
    """Clamp *value* into the closed interval [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class Location:
    """A point on the simulation plane."""

    x: int
    y: int

    def displaced(self, dx: int, dy: int, width: int, height: int) -> Location:
        """Return this location shifted by (dx, dy) and clamped into the area."""
        return Location(clamp(self.x + dx, 0, width), clamp(self.y + dy, 0, height))


def distance(a: Location, b: Location) -> float:
    """Euclidean distance between two locations."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)
