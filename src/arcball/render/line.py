"""Single-line rasterization for the point animation.

Maps the render positions of a point sequence onto a fixed-width character
buffer:

    scaling_factor = output_width / (2 * scale_axis_extent)
    column         = floor(floor(render_position) * scaling_factor)

Columns outside [0, output_width - 1] are clamped to the nearest edge, so a
point is never dropped and never written out of bounds. Later points
overwrite earlier ones that share a column.
"""

import sys
from dataclasses import dataclass, field
from typing import Iterable, TextIO, Union

import numpy as np

from ..constants import DefaultAnimation
from ..points import Point, PointTrail


BLANK = " "


def render_positions(points: Union[PointTrail, Iterable[Point]]) -> np.ndarray:
    """Extract render positions as a float array."""
    if isinstance(points, PointTrail):
        return points.render
    return np.array([p.render_position for p in points], dtype=np.float64)


def columns_for(
    positions: np.ndarray,
    output_width: int,
    scale_axis_extent: float,
) -> np.ndarray:
    """Map render positions to buffer columns.

    Args:
        positions: Render positions
        output_width: Number of character columns
        scale_axis_extent: Half-span of the render axis

    Returns:
        Integer column indices in [0, output_width - 1]
    """
    scaling_factor = output_width / (2.0 * scale_axis_extent)
    columns = np.floor(np.floor(positions) * scaling_factor)
    return np.clip(columns, 0, output_width - 1).astype(np.int64)


def rasterize(
    points: Union[PointTrail, Iterable[Point]],
    output_width: int,
    scale_axis_extent: float,
    marker: str = DefaultAnimation.MARKER,
) -> str:
    """Rasterize a point sequence into one line of text.

    Args:
        points: PointTrail or iterable of Points
        output_width: Number of character columns
        scale_axis_extent: Half-span of the axis used for scaling
            (y_extent for ellipses, x_extent for parabolas)
        marker: Character written at each point

    Returns:
        String of exactly output_width characters
    """
    if output_width < 1:
        raise ValueError(f"output_width must be >= 1, got {output_width}")
    if scale_axis_extent <= 0:
        raise ValueError(f"scale_axis_extent must be > 0, got {scale_axis_extent}")

    buffer = np.full(output_width, BLANK, dtype="<U1")
    columns = columns_for(render_positions(points), output_width, scale_axis_extent)

    assert columns.size == 0 or (columns.min() >= 0 and columns.max() < output_width), \
        f"column out of range: {columns}"

    buffer[columns] = marker

    return "".join(buffer)


@dataclass
class LineWriter:
    """Writes rendered lines to a text stream.

    Each frame is followed by a newline, or by a carriage return when
    `redraw` is set so the next frame overwrites it in place.
    """
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    redraw: bool = False

    # Frames written so far
    line_count: int = field(default=0, init=False)

    @property
    def terminator(self) -> str:
        return "\r" if self.redraw else "\n"

    def write(self, line: str):
        """Write one frame and flush."""
        self.stream.write(line + self.terminator)
        self.stream.flush()
        self.line_count += 1

    def close(self):
        """Finish the output; moves past the redrawn line in redraw mode."""
        if self.redraw and self.line_count:
            self.stream.write("\n")
            self.stream.flush()
