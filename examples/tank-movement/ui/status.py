"""Status bar along the bottom of the window."""
from __future__ import annotations

import pygame

from tick_tank import Frame, MotionController

from ui.constants import PAUSED_COLOR, SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    frame: Frame,
    controller: MotionController,
    paused: bool,
) -> None:
    top = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, top, SCREEN_W, STATUS_H))

    s = controller.state
    length = controller.tracker.length()
    mode = "seeking" if controller.is_active else "idle"
    text = (
        f"tick {frame.tick_number}  {mode}  "
        f"angle {s.current_angle:7.1f} -> {s.target_angle:7.1f}  "
        f"path {min(s.distance_gone, length):7.1f} / {length:7.1f}"
    )
    surface.blit(font.render(text, True, TEXT_COLOR), (8, top + 7))

    if paused:
        label = font.render("PAUSED", True, PAUSED_COLOR)
    else:
        label = font.render("drag: path  C: clear  Space: pause  Esc: quit", True, TEXT_DIM)
    surface.blit(label, (SCREEN_W - label.get_width() - 8, top + 7))
