"""Point state for the animation.

A Point is one particle on the curve. The animation keeps its point
sequence in a PointTrail: three parallel numpy arrays of fixed length, so
the whole sequence can be advanced, shifted and rasterized in vectorized
passes.

Coordinates:
    - index_position: position along the curve's independent axis, [0, x_extent]
    - render_position: position along the render axis, nominally [0, 2 * y_extent]
    - direction: +1 (moving away from 0) or -1 (moving back toward 0)
"""

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Point:
    """One animated particle."""
    index_position: float = 0.0
    render_position: float = 0.0
    direction: int = 1

    def __post_init__(self):
        if self.direction not in (1, -1):
            raise ValueError(f"direction must be +1 or -1, got {self.direction}")


@dataclass(eq=False)
class PointTrail:
    """Fixed-length ordered sequence of points.

    The last slot is the head of the trail: in sliding-trail mode it is the
    only point advanced each frame, and every other slot holds the head's
    position from one frame further back.
    """
    length: int

    index: np.ndarray = field(init=False)
    render: np.ndarray = field(init=False)
    direction: np.ndarray = field(init=False)

    def __post_init__(self):
        """Start every point at (0, 0, +1)."""
        if self.length < 1:
            raise ValueError(f"trail length must be >= 1, got {self.length}")
        self.index = np.zeros(self.length, dtype=np.float64)
        self.render = np.zeros(self.length, dtype=np.float64)
        self.direction = np.ones(self.length, dtype=np.int64)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, slot: int) -> Point:
        return Point(
            index_position=float(self.index[slot]),
            render_position=float(self.render[slot]),
            direction=int(self.direction[slot]),
        )

    def __setitem__(self, slot: int, point: Point):
        self.index[slot] = point.index_position
        self.render[slot] = point.render_position
        self.direction[slot] = point.direction

    def __iter__(self) -> Iterator[Point]:
        for slot in range(self.length):
            yield self[slot]

    @property
    def head(self) -> Point:
        """The last point in the sequence."""
        return self[-1]

    def shifted(self, head: Point) -> "PointTrail":
        """Return a new trail shifted left by one with `head` in the last slot.

        The oldest point (slot 0) falls off the front.
        """
        trail = PointTrail(self.length)
        trail.index = np.roll(self.index, -1)
        trail.render = np.roll(self.render, -1)
        trail.direction = np.roll(self.direction, -1)
        trail[-1] = head
        return trail
