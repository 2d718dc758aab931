#!/usr/bin/env python3
"""
Frame scheduling.

Callbacks ask for the next frame with request_frame(), the way an animation
frame callback re-registers itself. A frame runs every callback that was queued
before the frame began; callbacks queued while it runs wait for the next frame.
The scheduler never runs a callback twice for one request, and all callbacks run
on the thread that drives the frames.
"""
import logging
import os
from typing import Callable, List

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from .constants import TARGET_FPS

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler:
    def __init__(self):
        self._pending: List[FrameCallback] = []
        self.frame_count = 0

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_pending(self) -> int:
        """Run one frame's worth of callbacks; returns how many ran."""
        batch, self._pending = self._pending, []
        for cb in batch:
            cb()
        self.frame_count += 1
        return len(batch)


class ManualScheduler(FrameScheduler):
    """Frames advance only when asked. Used by tests and headless runs."""

    def advance(self, frames: int = 1) -> int:
        ran = 0
        for _ in range(frames):
            ran += self.run_pending()
        return ran


class PygameFrameScheduler(FrameScheduler):
    """
    Display-refresh loop capped with pygame.time.Clock.

    run(on_frame) runs pending callbacks, then calls on_frame (events, drawing),
    then waits out the rest of the frame. The loop ends when on_frame returns False.
    """

    def __init__(self, fps: int = TARGET_FPS):
        super().__init__()
        self.fps = fps
        self.clock = None

    def run(self, on_frame: Callable[[], bool]) -> None:
        self.clock = pygame.time.Clock()
        logger.info("Frame loop started at %d fps", self.fps)
        while True:
            self.run_pending()
            if not on_frame():
                break
            self.clock.tick(self.fps)
        logger.info("Frame loop stopped after %d frames", self.frame_count)
