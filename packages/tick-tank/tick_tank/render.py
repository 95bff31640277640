"""Paint a Frame on a pygame surface."""
from __future__ import annotations

import pygame

from tick_tank.frame import Frame


def draw_path(surface: pygame.Surface, frame: Frame) -> None:
    """Stroke the path with round joins and caps."""
    points = [(p.x, p.y) for p in frame.path]
    if len(points) < 2:
        return
    width = max(int(round(frame.path_width)), 1)
    pygame.draw.lines(surface, frame.path_color, False, points, width)
    if width > 2:
        # pygame has no round join; cap every vertex with a disc.
        radius = width / 2.0
        for point in points:
            pygame.draw.circle(surface, frame.path_color, point, radius)


def draw_sprite(surface: pygame.Surface, frame: Frame, sprite: pygame.Surface) -> None:
    # pygame rotates counterclockwise; headings turn clockwise on screen.
    rotated = pygame.transform.rotate(sprite, -frame.sprite.rotate_deg)
    center = frame.sprite.center
    surface.blit(rotated, rotated.get_rect(center=(round(center.x), round(center.y))))


def draw_frame(surface: pygame.Surface, frame: Frame, sprite: pygame.Surface) -> None:
    surface.fill(frame.background)
    draw_path(surface, frame)
    marker = frame.destination
    if marker is not None:
        pygame.draw.circle(
            surface, marker.color, (marker.center.x, marker.center.y), marker.radius
        )
    draw_sprite(surface, frame, sprite)
