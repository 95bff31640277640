"""Per-tick drawable state."""
from __future__ import annotations

from dataclasses import dataclass

from tick_tank.config import Color, TankConfig
from tick_tank.motion import MotionController, SpriteTransform
from tick_tank.vec import Point2D


@dataclass(frozen=True)
class DestinationMarker:
    center: Point2D
    radius: float
    color: Color


@dataclass(frozen=True)
class Frame:
    """Everything a render surface needs to paint one tick. Not shared with the core."""

    tick_number: int
    background: Color
    path: tuple[Point2D, ...]
    path_color: Color
    path_width: float
    destination: DestinationMarker | None
    sprite: SpriteTransform


def compose_frame(controller: MotionController, config: TankConfig, tick_number: int = 0) -> Frame:
    marker = None
    if controller.destination is not None:
        marker = DestinationMarker(
            center=controller.destination,
            radius=config.destination_radius,
            color=config.destination_color,
        )
    return Frame(
        tick_number=tick_number,
        background=config.background_color,
        path=controller.tracker.points,
        path_color=config.path_color,
        path_width=config.path_width,
        destination=marker,
        sprite=controller.transform(),
    )
