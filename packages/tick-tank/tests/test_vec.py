"""Tests for 2D point and vector helpers."""
from __future__ import annotations

import dataclasses
import math

import pytest

from tick_tank import vec
from tick_tank.vec import Point2D


class TestPoint2D:
    def test_is_immutable(self) -> None:
        p = Point2D(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 3.0  # type: ignore[misc]

    def test_unpacks(self) -> None:
        x, y = Point2D(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)

    def test_equality_by_value(self) -> None:
        assert Point2D(1.0, 2.0) == Point2D(1.0, 2.0)


class TestArithmetic:
    def test_add(self) -> None:
        assert vec.add(Point2D(1.0, 2.0), Point2D(3.0, 4.0)) == Point2D(4.0, 6.0)

    def test_sub(self) -> None:
        assert vec.sub(Point2D(5.0, 3.0), Point2D(1.0, 2.0)) == Point2D(4.0, 1.0)

    def test_scale(self) -> None:
        assert vec.scale(Point2D(1.0, -2.0), -2.0) == Point2D(-2.0, 4.0)

    def test_magnitude(self) -> None:
        assert vec.magnitude(Point2D(3.0, 4.0)) == pytest.approx(5.0)

    def test_distance(self) -> None:
        assert vec.distance(Point2D(1.0, 1.0), Point2D(4.0, 5.0)) == pytest.approx(5.0)

    def test_lerp_midpoint(self) -> None:
        assert vec.lerp(Point2D(0.0, 0.0), Point2D(10.0, -4.0), 0.5) == Point2D(5.0, -2.0)


class TestHeading:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Point2D(1.0, 0.0), 0.0),
            (Point2D(0.0, 1.0), 90.0),
            (Point2D(-1.0, 0.0), 180.0),
            (Point2D(0.0, -1.0), -90.0),
        ],
    )
    def test_cardinal_directions(self, direction: Point2D, expected: float) -> None:
        assert vec.heading_deg(direction) == pytest.approx(expected)

    def test_scale_invariant(self) -> None:
        assert vec.heading_deg(Point2D(3.0, 3.0)) == pytest.approx(
            vec.heading_deg(Point2D(0.5, 0.5))
        )


class TestRotateAbout:
    def test_quarter_turn_moves_x_to_y(self) -> None:
        p = vec.rotate_about(Point2D(2.0, 1.0), Point2D(1.0, 1.0), 90.0)
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(2.0)

    def test_pivot_is_fixed(self) -> None:
        pivot = Point2D(7.0, -3.0)
        p = vec.rotate_about(pivot, pivot, 123.0)
        assert p.x == pytest.approx(pivot.x)
        assert p.y == pytest.approx(pivot.y)

    def test_full_turn_is_identity(self) -> None:
        p = vec.rotate_about(Point2D(5.0, 2.0), Point2D(0.0, 0.0), 360.0)
        assert math.isclose(p.x, 5.0, abs_tol=1e-9)
        assert math.isclose(p.y, 2.0, abs_tol=1e-9)
