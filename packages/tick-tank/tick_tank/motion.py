"""MotionController - turn-then-translate state machine for a path-following sprite."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

from tick_tank import vec
from tick_tank.path import PathTracker
from tick_tank.types import SnapshotError
from tick_tank.vec import ORIGIN, Point2D

if TYPE_CHECKING:
    from tick_tank.config import TankConfig

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


@dataclass
class MotionState:
    """Sprite position, heading and path progress.

    position is the sprite's top-left corner; anchor_offset is the pivot in
    sprite-local coordinates (half the sprite size), fixed at construction.
    """

    position: Point2D
    speed: float
    rotation_speed: float
    distance_gone: float = 0.0
    current_angle: float = 0.0
    target_angle: float = 0.0
    anchor_offset: Point2D = ORIGIN


@dataclass(frozen=True)
class SpriteTransform:
    """Rotate by rotate_deg about pivot, then translate."""

    rotate_deg: float
    pivot: Point2D
    translate: Point2D

    def apply(self, p: Point2D) -> Point2D:
        """Map a sprite-local point to surface coordinates."""
        return vec.add(vec.rotate_about(p, self.pivot, self.rotate_deg), self.translate)

    @property
    def center(self) -> Point2D:
        return vec.add(self.pivot, self.translate)


def _shortest_delta(target: float, current: float) -> float:
    return (target - current + 180.0) % 360.0 - 180.0


class MotionController:
    def __init__(
        self,
        state: MotionState,
        tracker: PathTracker | None = None,
        normalize_turns: bool = False,
    ) -> None:
        self._state = state
        self._tracker = tracker if tracker is not None else PathTracker()
        self._normalize_turns = normalize_turns
        self._destination: Point2D | None = None

    @classmethod
    def from_config(cls, config: TankConfig, sprite_size: tuple[int, int]) -> MotionController:
        """Controller for a sprite of the given pixel size, parked at (width, height)."""
        width, height = sprite_size
        state = MotionState(
            position=Point2D(float(width), float(height)),
            speed=config.speed,
            rotation_speed=config.rotation_speed,
            anchor_offset=Point2D(width / 2.0, height / 2.0),
        )
        return cls(state, normalize_turns=config.normalize_turns)

    @property
    def state(self) -> MotionState:
        return self._state

    @property
    def tracker(self) -> PathTracker:
        return self._tracker

    @property
    def destination(self) -> Point2D | None:
        return self._destination

    @property
    def is_active(self) -> bool:
        return self._destination is not None

    def set_destination(self, p: Point2D) -> None:
        """Seek p, extending the current path or starting one at the sprite."""
        self._destination = p
        if self._tracker.is_empty:
            self._state.distance_gone = 0.0
            self._tracker.append_point(self._state.position)
            logger.debug("Seek started: from=%s to=%s", self._state.position, p)
        self._tracker.append_point(p)

    def clear_path(self) -> None:
        """Drop the path, the destination and all path progress."""
        self._tracker.reset()
        self._destination = None
        self._state.distance_gone = 0.0

    def advance(self) -> None:
        """One tick: turn one step toward the target, or snap and move along the path."""
        if self._destination is None:
            return
        s = self._state
        if self._normalize_turns:
            delta = _shortest_delta(s.target_angle, s.current_angle)
        else:
            delta = s.target_angle - s.current_angle

        if delta > s.rotation_speed:
            s.current_angle += s.rotation_speed
        elif -delta > s.rotation_speed:
            s.current_angle -= s.rotation_speed
        else:
            s.current_angle = s.target_angle
            self._translate()

    def _translate(self) -> None:
        s = self._state
        if s.distance_gone < self._tracker.length():
            sampled = self._tracker.sample(s.distance_gone)
            if sampled is None:
                return
            position, tangent = sampled
            s.target_angle = vec.heading_deg(tangent)
            s.position = vec.sub(position, s.anchor_offset)
            s.distance_gone += s.speed
        else:
            logger.debug(
                "Seek finished: destination=%s distance=%.2f", self._destination, s.distance_gone
            )
            self._destination = None

    def transform(self) -> SpriteTransform:
        s = self._state
        return SpriteTransform(
            rotate_deg=s.current_angle, pivot=s.anchor_offset, translate=s.position
        )

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible position and heading. Path, destination and target are not kept."""
        return {
            "version": _SNAPSHOT_VERSION,
            "position": [self._state.position.x, self._state.position.y],
            "current_angle": self._state.current_angle,
        }

    def restore(self, data: Mapping[str, Any]) -> None:
        if not isinstance(data, Mapping):
            raise SnapshotError(f"Malformed snapshot: expected a mapping, got {type(data).__name__}")
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        try:
            x, y = data["position"]
            position = Point2D(float(x), float(y))
            angle = float(data["current_angle"])
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc}") from exc
        if not all(math.isfinite(v) for v in (position.x, position.y, angle)):
            raise SnapshotError(f"Malformed snapshot: non-finite value in {dict(data)!r}")

        self.clear_path()
        self._state.position = position
        self._state.current_angle = angle
        self._state.target_angle = angle
