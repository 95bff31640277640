"""MovementLoop - single-threaded tick driver, pacing, and frame hooks."""
from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Callable

from tick_tank.config import TankConfig
from tick_tank.frame import Frame, compose_frame
from tick_tank.motion import MotionController
from tick_tank.vec import Point2D

logger = logging.getLogger(__name__)

FrameHook = Callable[[Frame], None]

# Input commands funnelled onto the loop thread.
_CLEAR = object()


class MovementLoop:
    """Drives a MotionController one tick at a time.

    Input from any thread is queued and drained at the start of the next
    tick, so the controller and its path are only touched by the thread
    running step(). Frames are immutable and handed to hooks after each tick.
    """

    def __init__(self, controller: MotionController, config: TankConfig) -> None:
        self._controller = controller
        self._config = config
        self._inbox: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._frame_hooks: list[FrameHook] = []
        self._tick_number = 0
        self._latest: Frame = compose_frame(controller, config, 0)
        self._running = False
        self._thread: threading.Thread | None = None

    @property
    def controller(self) -> MotionController:
        return self._controller

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def latest_frame(self) -> Frame:
        return self._latest

    @property
    def running(self) -> bool:
        return self._running

    def on_frame(self, hook: FrameHook) -> None:
        self._frame_hooks.append(hook)

    def post_destination(self, p: Point2D) -> None:
        self._inbox.put(p)

    def post_clear(self) -> None:
        self._inbox.put(_CLEAR)

    def _drain(self) -> None:
        while True:
            try:
                item = self._inbox.get_nowait()
            except queue.Empty:
                return
            if item is _CLEAR:
                self._controller.clear_path()
            else:
                self._controller.set_destination(item)  # type: ignore[arg-type]

    def step(self) -> Frame:
        self._tick_number += 1
        self._drain()
        self._controller.advance()
        frame = compose_frame(self._controller, self._config, self._tick_number)
        self._latest = frame
        for hook in self._frame_hooks:
            hook(frame)
        return frame

    def run_forever(self) -> None:
        """Tick on the calling thread until stop() is requested."""
        self._running = True
        self._loop()

    def _loop(self) -> None:
        # Overrun ticks are dropped, not made up.
        interval = self._config.tick_interval
        while self._running:
            start = time.monotonic()
            self.step()
            sleep_time = interval - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)
        if self._thread is threading.current_thread():
            self._thread = None
            logger.info("Movement loop stopped: ticks=%s", self._tick_number)

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Movement loop already started")
        self._running = True
        self._thread = threading.Thread(target=self._loop, name="tick-tank-movement", daemon=True)
        self._thread.start()
        logger.info("Movement loop started: interval=%.3fs", self._config.tick_interval)

    def stop(self) -> None:
        """Request a stop and wait for the loop thread to finish its tick."""
        self._running = False
        thread = self._thread
        # From a frame hook the loop thread clears itself on exit.
        if thread is not None and thread is not threading.current_thread():
            thread.join()
