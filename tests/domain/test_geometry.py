"""Tests for epidemic_abm.domain.geometry."""

from __future__ import annotations

import math

import pytest

from epidemic_abm.domain.geometry import Location, clamp, distance


class TestDistance:
    def test_same_point_is_zero(self) -> None:
        assert distance(Location(4, 9), Location(4, 9)) == 0.0

    def test_pythagorean_triple(self) -> None:
        assert distance(Location(0, 0), Location(3, 4)) == 5.0

    def test_symmetric(self) -> None:
        a, b = Location(-7, 2), Location(11, -30)
        assert distance(a, b) == distance(b, a)

    def test_matches_hypot(self) -> None:
        a, b = Location(123, 456), Location(789, 12)
        assert distance(a, b) == pytest.approx(math.hypot(666, 444))


class TestClamp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-2, 0), (0, 0), (5, 5), (10, 10), (13, 10)],
    )
    def test_clamp_into_closed_interval(self, value: int, expected: int) -> None:
        assert clamp(value, 0, 10) == expected


class TestDisplaced:
    def test_zero_displacement_at_edge_stays(self) -> None:
        assert Location(0, 0).displaced(0, 0, 900, 600) == Location(0, 0)

    def test_negative_overshoot_clamps_to_zero(self) -> None:
        assert Location(3, 3).displaced(-5, -5, 900, 600) == Location(0, 0)

    def test_upper_bound_is_inclusive(self) -> None:
        assert Location(898, 598).displaced(5, 5, 900, 600) == Location(900, 600)

    def test_returns_new_value(self) -> None:
        origin = Location(10, 10)
        moved = origin.displaced(1, -1, 900, 600)
        assert origin == Location(10, 10)
        assert moved == Location(11, 9)
