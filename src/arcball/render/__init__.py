"""Terminal rendering of the point sequence."""

from .line import (
    rasterize,
    columns_for,
    render_positions,
    LineWriter,
    BLANK,
)

__all__ = [
    "rasterize",
    "columns_for",
    "render_positions",
    "LineWriter",
    "BLANK",
]
