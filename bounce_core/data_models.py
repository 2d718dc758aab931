#!/usr/bin/env python3
"""
Data models for Calm Bounce.

This module defines the small value types shared between the motion engine,
the controller and the renderer.

Units and usage
- positions are in pixels [px], velocities in pixels per tick [px/tick].
- timestamps are milliseconds from the engine clock [ms].
- BallState is owned by a single MotionEngine and mutated once per tick; the
  other types are immutable.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import BOTTOM_INSET, TOP_INSET


class Axis(Enum):
    X = "x"
    Y = "y"


@dataclass
class BallState:
    """
    Position and velocity of the ball.

    Fields:
    - x, y: center of the ball in pixels
    - vx, vy: displacement per tick in pixels
    """
    x: float
    y: float
    vx: float
    vy: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> Tuple[float, float]:
        return (self.vx, self.vy)


@dataclass(frozen=True)
class Bounds:
    """
    Rectangle the ball center is constrained to.

    Built directly when the caller already knows the region, or from the
    viewport with from_viewport(), which reserves room for the status bar and
    the control panel.
    """
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Empty bounds: x [{self.min_x}, {self.max_x}], y [{self.min_y}, {self.max_y}]"
            )

    @classmethod
    def from_viewport(cls, width: float, height: float, radius: float,
                      top_inset: float = TOP_INSET, bottom_inset: float = BOTTOM_INSET) -> "Bounds":
        return cls(
            min_x=radius,
            max_x=width - radius,
            min_y=radius + top_inset,
            max_y=height - radius - bottom_inset,
        )

    def limits(self, axis: Axis) -> Tuple[float, float]:
        if axis is Axis.X:
            return (self.min_x, self.max_x)
        return (self.min_y, self.max_y)

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True)
class TrailPoint:
    x: float
    y: float
    created_at: float  # ms


@dataclass(frozen=True)
class CollisionEvent:
    """Raised for one axis when a tick's displacement reaches a wall."""
    axis: Axis


@dataclass(frozen=True)
class StepResult:
    x: float
    y: float
    collisions: Tuple[CollisionEvent, ...] = ()

    @property
    def collided(self) -> bool:
        return bool(self.collisions)
