#!/usr/bin/env python3
"""
Fading trail of recent ball positions.

The trail is ordered newest first. Each point lives for a fixed time after it
was created and the sequence never holds more than a fixed number of points.
Only the renderer reads it; the physics never does.
"""
from collections import deque
from typing import Deque, Iterator, List, Tuple

from .constants import (
    TRAIL_CAPACITY,
    TRAIL_LIFETIME_MS,
    TRAIL_MAX_OPACITY,
    TRAIL_MIN_SCALE,
    TRAIL_SCALE_RANGE,
)
from .data_models import TrailPoint


class Trail:
    def __init__(self, capacity: int = TRAIL_CAPACITY, lifetime_ms: float = TRAIL_LIFETIME_MS):
        self.capacity = max(1, int(capacity))
        self.lifetime_ms = float(lifetime_ms)
        self._points: Deque[TrailPoint] = deque(maxlen=self.capacity)

    def push(self, x: float, y: float, now: float) -> None:
        """Add a point at the front, then drop what has expired."""
        self._points.appendleft(TrailPoint(x, y, now))
        self.prune(now)

    def prune(self, now: float) -> None:
        # Oldest points sit at the right end
        while self._points and now - self._points[-1].created_at >= self.lifetime_ms:
            self._points.pop()

    def clear(self) -> None:
        self._points.clear()

    def points(self) -> List[TrailPoint]:
        return list(self._points)

    def fade_weights(self) -> List[Tuple[float, float]]:
        """
        Per-point (opacity, scale) for drawing, newest first.

        The newest point is the most opaque and the largest; both fall off
        linearly towards the oldest one.
        """
        n = len(self._points)
        weights = []
        for i in range(n):
            f = (n - i) / n
            weights.append((f * TRAIL_MAX_OPACITY, f * TRAIL_SCALE_RANGE + TRAIL_MIN_SCALE))
        return weights

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TrailPoint]:
        return iter(list(self._points))
