"""Tank Movement — Draw a path, watch the tank follow it.

Exercises tick-tank: PathTracker, MotionController, MovementLoop, rendering,
and position/heading snapshots.

Controls:
  Click/drag  Add destinations (extends the current path)
  C           Clear the path
  Space       Pause / Resume
  Esc         Quit (saves position and heading with --state)
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pygame

from tick_tank import (
    ConfigError,
    MotionController,
    MovementLoop,
    Point2D,
    SnapshotError,
    TankConfig,
)
from tick_tank.render import draw_frame
from tick_tank.sprite import load_sprite

from ui.constants import FPS, SCREEN_H, SCREEN_W, STATUS_H
from ui.status import draw_status_bar

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tank Movement — tick-tank visual demo")
    p.add_argument("--config", type=Path, default=None,
                   metavar="FILE", help="JSON file with TankConfig fields")
    p.add_argument("--state", type=Path, default=None,
                   metavar="FILE", help="Restore position/heading from FILE and save on quit")
    p.add_argument("--normalize-turns", action="store_true",
                   help="Turn through the shortest angle instead of the raw difference")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def load_config(args: argparse.Namespace) -> TankConfig:
    data = {}
    if args.config is not None:
        with args.config.open(encoding="utf-8") as f:
            data = json.load(f)
    if args.normalize_turns:
        data["normalize_turns"] = True
    return TankConfig.from_mapping(data)


def restore_state(controller: MotionController, path: Path | None) -> None:
    if path is None or not path.exists():
        return
    try:
        with path.open(encoding="utf-8") as f:
            controller.restore(json.load(f))
    except (SnapshotError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring saved state %s: %s", path, exc)
        return
    logger.info("Restored state from %s", path)


def save_state(controller: MotionController, path: Path | None) -> None:
    if path is None:
        return
    with path.open("w", encoding="utf-8") as f:
        json.dump(controller.snapshot(), f)
    logger.info("Saved state to %s", path)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
    except (ConfigError, OSError, json.JSONDecodeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Tank Movement — tick-tank demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    try:
        sprite = load_sprite(config)
    except ConfigError as exc:
        logger.error("%s", exc)
        pygame.quit()
        sys.exit(2)

    controller = MotionController.from_config(config, sprite.get_size())
    restore_state(controller, args.state)
    loop = MovementLoop(controller, config)

    tick_interval = config.tick_interval
    accumulator = 0.0
    paused = False
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_c:
                    loop.post_clear()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if my < SCREEN_H - STATUS_H:
                    loop.post_destination(Point2D(float(mx), float(my)))

            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                mx, my = event.pos
                if my < SCREEN_H - STATUS_H:
                    loop.post_destination(Point2D(float(mx), float(my)))

        # --- Tick ---
        if paused:
            accumulator = 0.0
        if accumulator >= tick_interval:
            # Late ticks are dropped, never queued.
            loop.step()
            accumulator %= tick_interval

        # --- Render ---
        frame = loop.latest_frame
        draw_frame(screen, frame, sprite)
        draw_status_bar(screen, font, frame, controller, paused)

        pygame.display.flip()

    save_state(controller, args.state)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
