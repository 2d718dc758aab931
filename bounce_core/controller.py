#!/usr/bin/env python3
"""
Animation controller: the two toggles and the tick chain.

What this module does
- Owns the MotionEngine and the ToneGenerator and keeps them apart: the only
  thing that crosses from motion to audio is "a collision happened".
- Starting schedules a tick; every tick re-requests the next frame while playing.
  Pausing only sets a flag, which the next tick reads at its top and stops the
  chain, so a tick that has begun always finishes.
- At most one tick is ever queued. A Pause+Start arriving while a tick runs
  (from a tone callback or another thread) reuses the chain instead of adding one.
- The sound toggle gates synthesis only. Collisions are still computed with sound
  off.

Threading
- Toggles and ticks are guarded by a re-entrant lock, so the controller stays
  consistent if a UI toolkit calls a toggle from its own thread.
"""
import logging
import threading
from typing import Optional

from .data_models import StepResult
from .motion import MotionEngine
from .scheduler import FrameScheduler
from .sound import ToneGenerator

logger = logging.getLogger(__name__)


class AnimationController:
    def __init__(self, engine: MotionEngine, tones: ToneGenerator, scheduler: FrameScheduler):
        self.lock = threading.RLock()
        self.engine = engine
        self.tones = tones
        self.scheduler = scheduler
        self.playing = False
        self.sound_enabled = False
        self.last_result: Optional[StepResult] = None
        self.tick_count = 0
        self.bounce_count = 0
        self._tick_scheduled = False

    def load_sound(self) -> bool:
        """Initialize audio and turn sound on; on failure stay silent and keep going."""
        with self.lock:
            self.sound_enabled = self.tones.initialize()
        if not self.sound_enabled:
            logger.warning("Sound disabled: audio output could not be initialized")
        return self.sound_enabled

    # -----------------------
    # Toggles
    # -----------------------

    def start(self) -> None:
        with self.lock:
            self.playing = True
            self._ensure_tick_scheduled()
        logger.debug("Animation started")

    def pause(self) -> None:
        with self.lock:
            self.playing = False
        logger.debug("Animation paused")

    def toggle_playing(self) -> bool:
        with self.lock:
            if self.playing:
                self.pause()
            else:
                self.start()
            return self.playing

    def set_sound_enabled(self, enabled: bool) -> bool:
        with self.lock:
            if enabled and not self.tones.initialized:
                enabled = self.tones.initialize()
            self.sound_enabled = bool(enabled)
        logger.debug("Sound %s", "on" if self.sound_enabled else "off")
        return self.sound_enabled

    def toggle_sound(self) -> bool:
        with self.lock:
            return self.set_sound_enabled(not self.sound_enabled)

    # -----------------------
    # Tick chain
    # -----------------------

    def _ensure_tick_scheduled(self) -> None:
        if self._tick_scheduled:
            return
        self._tick_scheduled = True
        self.scheduler.request_frame(self._tick)

    def _tick(self) -> None:
        with self.lock:
            self._tick_scheduled = False
            if not self.playing:
                return
            self.step_once()
            # A start() during the step may already have queued the next tick
            if self.playing:
                self._ensure_tick_scheduled()

    def step_once(self) -> StepResult:
        """Advance one tick and sound any collisions it raised."""
        with self.lock:
            result = self.engine.step()
            self.last_result = result
            self.tick_count += 1
            if result.collided:
                self.bounce_count += len(result.collisions)
                self._on_collisions(result)
            return result

    def _on_collisions(self, result: StepResult) -> None:
        if not (self.sound_enabled and self.playing):
            return
        # One tone per collision event, so a corner hit sounds twice
        for _ in result.collisions:
            self.tones.play_bounce_tone()
