"""
Animation Configuration Dataclass

Provides a single validated configuration object for one animation run.
All values are checked once in __post_init__, before the frame loop starts;
overrides produce a new validated instance rather than mutating in place.

Step-size policy:
    step = output_width / resolution

    When resolution is omitted it defaults to
    min(frame_rate + point_count, output_width).
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .constants import DefaultAnimation
from .errors import ConfigurationError


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class TrailMode(Enum):
    """How the point sequence advances each frame."""
    TRAIL = "trail"        # advance the head, shift the rest (delay line)
    UNIFORM = "uniform"    # advance every point independently


@dataclass(frozen=True)
class AnimationConfig:
    """
    Configuration for one animation run.

    Attributes:
        frame_rate: Frames per second (> 0)
        point_count: Number of points in the sequence (>= 1)
        total_duration: Seconds to run; any negative value runs forever
        output_width: Character columns of each rendered line (>= 1)
        resolution: Steps across the output width (1..output_width), optional
        mode: TrailMode.TRAIL (comet trail) or TrailMode.UNIFORM
        redraw: Redraw frames in place with a carriage return
        marker: Single character drawn at each point
    """

    frame_rate: float = DefaultAnimation.FRAME_RATE
    point_count: int = DefaultAnimation.POINT_COUNT
    total_duration: float = DefaultAnimation.TOTAL_DURATION
    output_width: int = DefaultAnimation.OUTPUT_WIDTH
    resolution: Optional[int] = None
    mode: TrailMode = TrailMode.TRAIL
    redraw: bool = False
    marker: str = DefaultAnimation.MARKER

    def __post_init__(self):
        """Validate field values after initialization."""
        if not (_is_number(self.frame_rate) and math.isfinite(self.frame_rate) and self.frame_rate > 0):
            raise ConfigurationError(f"frame_rate = {self.frame_rate!r} must be a finite number > 0")

        for name in ("point_count", "output_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} = {value!r} must be an integer >= 1")

        if not (_is_number(self.total_duration) and math.isfinite(self.total_duration)):
            raise ConfigurationError(
                f"total_duration = {self.total_duration!r} must be a finite number "
                f"(use -1 to run forever)"
            )

        if self.resolution is not None:
            if isinstance(self.resolution, bool) or not isinstance(self.resolution, int):
                raise ConfigurationError(f"resolution = {self.resolution!r} must be an integer")
            if self.resolution < 1:
                raise ConfigurationError(f"resolution = {self.resolution} must be >= 1")
            if self.resolution > self.output_width:
                raise ConfigurationError(
                    f"resolution = {self.resolution} exceeds output_width = {self.output_width}"
                )

        if not isinstance(self.mode, TrailMode):
            try:
                object.__setattr__(self, "mode", TrailMode(self.mode))
            except ValueError:
                raise ConfigurationError(
                    f"mode = {self.mode!r} must be one of "
                    f"{', '.join(m.value for m in TrailMode)}"
                ) from None

        if not isinstance(self.marker, str) or len(self.marker) != 1:
            raise ConfigurationError(f"marker = {self.marker!r} must be a single character")

    def with_overrides(self, **changes) -> "AnimationConfig":
        """Return a new validated config with the given fields replaced."""
        try:
            return replace(self, **changes)
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration option: {e}") from None

    @property
    def effective_resolution(self) -> int:
        """Resolution used for the step size."""
        if self.resolution is not None:
            return self.resolution
        return int(min(self.frame_rate + self.point_count, self.output_width))

    @property
    def step(self) -> float:
        """Index distance each point moves per frame."""
        return self.output_width / self.effective_resolution

    @property
    def frame_period(self) -> float:
        """Seconds per frame."""
        return 1.0 / self.frame_rate

    @property
    def runs_forever(self) -> bool:
        return self.total_duration < 0

    @property
    def frame_budget(self) -> Optional[int]:
        """Number of frames a bounded run renders (None when running forever).

        Frame k starts at k / frame_rate and is rendered while that is
        strictly below total_duration.
        """
        if self.runs_forever:
            return None
        frames = max(0, math.ceil(self.total_duration * self.frame_rate))
        # Correct for float rounding in the product
        while frames > 0 and (frames - 1) / self.frame_rate >= self.total_duration:
            frames -= 1
        while frames / self.frame_rate < self.total_duration:
            frames += 1
        return frames

    def summary(self) -> str:
        """One-line human-readable description."""
        duration = "forever" if self.runs_forever else f"{self.total_duration}s"
        return (
            f"{self.frame_rate} fps | {self.point_count} points | {duration} | "
            f"width {self.output_width} | resolution {self.effective_resolution} | "
            f"{self.mode.value}"
        )
