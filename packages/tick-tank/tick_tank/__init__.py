"""tick-tank - Path-following sprite motion for tick-driven hosts."""
from __future__ import annotations

from tick_tank import vec
from tick_tank.config import TankConfig
from tick_tank.frame import DestinationMarker, Frame, compose_frame
from tick_tank.loop import MovementLoop
from tick_tank.motion import MotionController, MotionState, SpriteTransform
from tick_tank.path import PathTracker
from tick_tank.types import ConfigError, SnapshotError
from tick_tank.vec import Point2D

__all__ = [
    "ConfigError",
    "DestinationMarker",
    "Frame",
    "MotionController",
    "MotionState",
    "MovementLoop",
    "PathTracker",
    "Point2D",
    "SnapshotError",
    "SpriteTransform",
    "TankConfig",
    "compose_frame",
    "vec",
]
