"""2D point type and vector math helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Point2D:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


ORIGIN = Point2D(0.0, 0.0)


def add(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x + b.x, a.y + b.y)


def sub(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x - b.x, a.y - b.y)


def scale(v: Point2D, s: float) -> Point2D:
    return Point2D(v.x * s, v.y * s)


def magnitude(v: Point2D) -> float:
    return math.hypot(v.x, v.y)


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def lerp(a: Point2D, b: Point2D, t: float) -> Point2D:
    return Point2D(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def heading_deg(v: Point2D) -> float:
    """Direction of v in degrees. Scale-invariant; (0, 0) yields 0.0."""
    return math.degrees(math.atan2(v.y, v.x))


def rotate_about(p: Point2D, pivot: Point2D, angle_deg: float) -> Point2D:
    """Rotate p around pivot. Positive angles turn +x toward +y (clockwise on screen)."""
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    dx = p.x - pivot.x
    dy = p.y - pivot.y
    return Point2D(
        pivot.x + dx * cos_a - dy * sin_a,
        pivot.y + dx * sin_a + dy * cos_a,
    )
