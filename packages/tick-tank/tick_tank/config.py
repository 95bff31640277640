"""Tank movement configuration dataclass."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Mapping

from tick_tank.types import ConfigError

Color = tuple[int, int, int]

DEFAULT_SPEED = 5
DEFAULT_ROTATION_SPEED = 2


@dataclass(frozen=True)
class TankConfig:
    """Immutable style and motion settings, read once before the core is built.

    Attributes:
        path_color: Stroke color of the drawn path.
        background_color: Surface fill color.
        path_width: Stroke width of the drawn path, in pixels.
        sprite_icon: Image file for the sprite, or None for the built-in tank.
        sprite_size: Display width of the sprite; height follows its aspect ratio.
        destination_radius: Radius of the destination marker.
        destination_color: Fill color of the destination marker.
        speed: Distance traveled along the path per translate tick.
        rotation_speed: Degrees turned per rotate tick.
        normalize_turns: Turn through the shortest signed angle instead of the
            raw difference.
        tick_interval: Seconds between ticks of a threaded loop.
    """

    path_color: Color = (128, 128, 128)
    background_color: Color = (255, 255, 255)
    path_width: float = 6.0
    sprite_icon: str | None = None
    sprite_size: float = 64.0
    destination_radius: float = 10.0
    destination_color: Color = (0, 0, 0)
    speed: float = DEFAULT_SPEED
    rotation_speed: float = DEFAULT_ROTATION_SPEED
    normalize_turns: bool = False
    tick_interval: float = 0.016

    def __post_init__(self) -> None:
        for name in ("path_color", "background_color", "destination_color"):
            _check_color(name, getattr(self, name))
        for name in ("path_width", "sprite_size", "speed", "rotation_speed", "tick_interval"):
            value = _check_number(name, getattr(self, name))
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")
        radius = _check_number("destination_radius", self.destination_radius)
        if radius < 0:
            raise ConfigError(f"destination_radius must not be negative, got {radius!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TankConfig:
        """Build a config from a plain mapping (e.g. parsed JSON).

        Missing keys keep their defaults. Color lists are converted to tuples.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        values = dict(data)
        for name in ("path_color", "background_color", "destination_color"):
            if name in values and isinstance(values[name], list):
                values[name] = tuple(values[name])
        return cls(**values)


def _check_color(name: str, value: Any) -> None:
    if (
        not isinstance(value, tuple)
        or len(value) != 3
        or not all(isinstance(c, int) and 0 <= c <= 255 for c in value)
    ):
        raise ConfigError(f"{name} must be an (r, g, b) tuple of 0-255 ints, got {value!r}")


def _check_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigError(f"{name} must be a finite number, got {value!r}")
    return value
