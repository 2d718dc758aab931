#!/usr/bin/env python3
"""
Motion Engine for Calm Bounce

Responsibilities
- Advance a single ball by its velocity once per tick.
- Detect wall contact on each axis, reflect and damp the velocity, clamp the position.
- Nudge the velocity with a rare small random kick so the path never settles into a loop.
- Record the clamped position in a short fading trail.

Units and conventions
- Positions are in pixels [px], velocities in pixels per tick [px/tick].
- Timestamps come from an injectable millisecond clock.

Numerical notes
- Each bounce keeps `damping` of the speed along that axis, so with jitter off the
  speed never grows. Nothing stops the velocity from decaying towards zero over a
  very long session; the jitter is the only thing that pushes back.
- A tick that reaches both walls at once (a corner) raises one event per axis.

Threading
- Not thread-safe and does not need to be: the frame scheduler runs every tick on
  the same thread, one at a time.
"""

import random
import time
from typing import Callable, List, Optional

from .constants import (
    DAMPING,
    INITIAL_VELOCITY,
    JITTER_AMOUNT,
    JITTER_PROBABILITY,
    TRAIL_CAPACITY,
    TRAIL_LIFETIME_MS,
)
from .data_models import Axis, BallState, Bounds, CollisionEvent, StepResult
from .trail import Trail
from .vector_utils import clamp, vec_len


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class MotionSettings:
    """Container for motion-related settings."""
    def __init__(self, damping: float = DAMPING, jitter_probability: float = JITTER_PROBABILITY,
                 jitter_amount: float = JITTER_AMOUNT, trail_capacity: int = TRAIL_CAPACITY,
                 trail_lifetime_ms: float = TRAIL_LIFETIME_MS):
        self.damping = clamp(float(damping), 0.0, 1.0)
        self.jitter_probability = clamp(float(jitter_probability), 0.0, 1.0)
        self.jitter_amount = max(0.0, float(jitter_amount))
        self.trail_capacity = max(1, int(trail_capacity))
        self.trail_lifetime_ms = max(0.0, float(trail_lifetime_ms))


def reflect(v: float, damping: float) -> float:
    """Reverse a velocity component and keep `damping` of its magnitude."""
    return -v * damping


class MotionEngine:
    """
    Single-body wall-bounce simulation.

    Each step:
    1) tentative advance: x += vx, y += vy
    2) per axis: on or past a wall -> reflect with damping, clamp, emit CollisionEvent
    3) with probability p, add (rand - 0.5) * amount to both velocity components
    4) push the clamped position onto the trail, prune by age and capacity
    """

    def __init__(self, bounds: Bounds, state: Optional[BallState] = None,
                 settings: Optional[MotionSettings] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = monotonic_ms):
        """
        Initialize the engine.

        Args:
            bounds: Region the ball center is kept in.
            state: Starting state; defaults to the center of the bounds moving at
                INITIAL_VELOCITY. Positions outside the bounds are clamped.
            settings: Damping, jitter and trail settings.
            rng: Random source for the jitter; pass a seeded one for reproducible runs.
            clock: Millisecond clock used to timestamp trail points.
        """
        self.bounds = bounds
        self.settings = settings or MotionSettings()
        self.rng = rng or random.Random()
        self.clock = clock
        self.trail = Trail(self.settings.trail_capacity, self.settings.trail_lifetime_ms)
        if state is None:
            cx, cy = bounds.center
            state = BallState(cx, cy, INITIAL_VELOCITY[0], INITIAL_VELOCITY[1])
        self.state = state
        self._clamp_into_bounds()

    def reset(self, x: float, y: float, vx: float, vy: float) -> None:
        """Place the ball, set its velocity and forget the trail."""
        self.state = BallState(x, y, vx, vy)
        self._clamp_into_bounds()
        self.trail.clear()

    @property
    def speed(self) -> float:
        return vec_len(self.state.velocity)

    def step(self, now: Optional[float] = None) -> StepResult:
        """
        Advance the ball by one tick.

        Args:
            now: Timestamp in ms for the trail point; read from the clock when omitted.

        Returns:
            StepResult with the clamped position and the collisions raised this tick.
        """
        s = self.state
        s.x += s.vx
        s.y += s.vy

        collisions: List[CollisionEvent] = []
        if self._resolve_axis(Axis.X):
            collisions.append(CollisionEvent(Axis.X))
        if self._resolve_axis(Axis.Y):
            collisions.append(CollisionEvent(Axis.Y))

        self._maybe_jitter()

        if now is None:
            now = self.clock()
        self.trail.push(s.x, s.y, now)

        return StepResult(s.x, s.y, tuple(collisions))

    def _resolve_axis(self, axis: Axis) -> bool:
        lo, hi = self.bounds.limits(axis)
        s = self.state
        if axis is Axis.X:
            if lo < s.x < hi:
                return False
            s.vx = reflect(s.vx, self.settings.damping)
            s.x = clamp(s.x, lo, hi)
        else:
            if lo < s.y < hi:
                return False
            s.vy = reflect(s.vy, self.settings.damping)
            s.y = clamp(s.y, lo, hi)
        return True

    def _maybe_jitter(self) -> None:
        p = self.settings.jitter_probability
        if p <= 0.0 or self.rng.random() >= p:
            return
        amount = self.settings.jitter_amount
        self.state.vx += (self.rng.random() - 0.5) * amount
        self.state.vy += (self.rng.random() - 0.5) * amount

    def _clamp_into_bounds(self) -> None:
        b = self.bounds
        self.state.x = clamp(self.state.x, b.min_x, b.max_x)
        self.state.y = clamp(self.state.y, b.min_y, b.max_y)
