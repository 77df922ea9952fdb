"""Curve families for the bouncing-point animation."""

from .shapes import (
    ShapeParameters,
    Curve,
    Ellipse,
    Parabola,
    CURVES,
    make_curve,
)

__all__ = [
    "ShapeParameters",
    "Curve",
    "Ellipse",
    "Parabola",
    "CURVES",
    "make_curve",
]
