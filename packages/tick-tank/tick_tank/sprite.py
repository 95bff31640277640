"""Sprite bitmap loading and scaling."""
from __future__ import annotations

import logging

import pygame

from tick_tank.config import TankConfig
from tick_tank.types import ConfigError

logger = logging.getLogger(__name__)

# Built-in tank, drawn facing +x (heading 0).
_HULL_COLOR = (70, 90, 60)
_TRACK_COLOR = (40, 40, 40)
_TURRET_COLOR = (100, 125, 85)


def scaled_size(width: int, height: int, size: float) -> tuple[int, int]:
    """Width becomes size; height follows the source aspect ratio."""
    if width <= 0 or height <= 0:
        raise ConfigError(f"Sprite image has no area: {width}x{height}")
    aspect = width / float(height)
    new_w = int(size)
    new_h = round(new_w / aspect)
    return new_w, max(new_h, 1)


def make_default_sprite(size: float) -> pygame.Surface:
    w = int(size)
    h = max(round(w * 0.75), 1)
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    track_h = max(h // 5, 1)
    pygame.draw.rect(surface, _TRACK_COLOR, (0, 0, w, track_h))
    pygame.draw.rect(surface, _TRACK_COLOR, (0, h - track_h, w, track_h))
    pygame.draw.rect(surface, _HULL_COLOR, (w // 10, track_h, w - w // 5, h - 2 * track_h))
    pygame.draw.circle(surface, _TURRET_COLOR, (w // 2, h // 2), max(h // 4, 1))
    pygame.draw.rect(surface, _TURRET_COLOR, (w // 2, h // 2 - max(h // 16, 1), w // 2, max(h // 8, 1)))
    return surface


def load_sprite(config: TankConfig) -> pygame.Surface:
    """Load and scale the configured sprite, or draw the built-in tank.

    Raises ConfigError when the icon cannot be read.
    """
    if config.sprite_icon is None:
        return make_default_sprite(config.sprite_size)
    try:
        image = pygame.image.load(config.sprite_icon)
    except (pygame.error, OSError) as exc:
        raise ConfigError(f"Cannot load sprite icon {config.sprite_icon!r}: {exc}") from exc
    size = scaled_size(image.get_width(), image.get_height(), config.sprite_size)
    logger.debug("Sprite loaded: icon=%s size=%sx%s", config.sprite_icon, *size)
    return pygame.transform.scale(image, size)
