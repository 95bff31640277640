"""PathTracker - touch-built polyline with an arc-length index."""
from __future__ import annotations

import bisect
import logging

from tick_tank import vec
from tick_tank.vec import Point2D

logger = logging.getLogger(__name__)


class PathTracker:
    """Append-only polyline that maps traveled distance to position and tangent.

    The index keeps one entry per non-zero-length segment: the cumulative
    distance at its start, its end vertices and its length. Duplicate
    consecutive points are kept as vertices (they are still stroked) but never
    enter the index.
    """

    def __init__(self) -> None:
        self._points: list[Point2D] = []
        self._ends: list[float] = []
        self._segments: list[tuple[float, Point2D, Point2D, float]] = []
        self._length: float = 0.0

    @property
    def points(self) -> tuple[Point2D, ...]:
        return tuple(self._points)

    @property
    def is_empty(self) -> bool:
        return not self._points

    def __len__(self) -> int:
        return len(self._points)

    def reset(self) -> None:
        if self._points:
            logger.debug("Path reset: vertices=%s length=%.2f", len(self._points), self._length)
        self._points.clear()
        self._ends.clear()
        self._segments.clear()
        self._length = 0.0

    def append_point(self, p: Point2D) -> None:
        if self._points:
            start = self._points[-1]
            seg_len = vec.distance(start, p)
            if seg_len > 0.0:
                self._segments.append((self._length, start, p, seg_len))
                self._length += seg_len
                self._ends.append(self._length)
        self._points.append(p)

    def length(self) -> float:
        return self._length

    def sample(self, distance: float) -> tuple[Point2D, Point2D] | None:
        """Position and tangent at the given traveled distance.

        Distance is clamped to [0, length()]. The tangent is the raw direction
        of the containing segment. Returns None when there is nothing to walk.
        """
        if not self._segments:
            return None
        d = min(max(distance, 0.0), self._length)
        idx = min(bisect.bisect_left(self._ends, d), len(self._segments) - 1)
        seg_start, start, end, seg_len = self._segments[idx]
        direction = vec.sub(end, start)
        t = (d - seg_start) / seg_len
        if t <= 0.0:
            return start, direction
        if t >= 1.0:
            return end, direction
        return vec.lerp(start, end, t), direction
