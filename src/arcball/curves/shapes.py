"""Curve families for the bouncing-point animation.

Implements two curve families over the same arc equation. Both map an
index position x in [0, x_extent] to a render position

    radius = sqrt(c - (x / x_extent)^2)
    render = (1 - direction * radius * reversal_sign) * y_extent

which covers [0, 2 * y_extent] for c = 1. The families differ only in the
axis the rasterizer scales against: y_extent for the ellipse, x_extent for
the parabola. The direction picks the near or far half of the arc; the
reversal sign swaps upper and lower halves, so one full oscillation traces
the whole closed curve. The clamp on the index and c >= 1 keep the radicand
non-negative.

The math is written once over numpy arrays. The scalar advance() contract
runs the same code on 0-d arrays.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Sequence, Tuple, Type

import numpy as np

from ..constants import DefaultShape
from ..errors import ShapeError
from ..points import Point


# =============================================================================
# Shape Parameters
# =============================================================================

@dataclass(frozen=True)
class ShapeParameters:
    """Immutable shape of one animation run.

    Attributes:
        x_extent: Domain half-width of the curve (index axis)
        y_extent: Range scale of the curve (render axis)
        curvature_constant: Shape coefficient (1.0 = unit ellipse/parabola)
    """
    x_extent: float = DefaultShape.X_EXTENT
    y_extent: float = DefaultShape.Y_EXTENT
    curvature_constant: float = DefaultShape.CURVATURE_CONSTANT

    def __post_init__(self):
        """Validate field values after initialization."""
        for name in ("x_extent", "y_extent", "curvature_constant"):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                raise ShapeError(f"{name} = {value} must be a positive finite number")

    @classmethod
    def from_sequence(cls, params: Optional[Sequence[float]] = None) -> "ShapeParameters":
        """Build shape parameters from an optional (x, y, c) sequence.

        Args:
            params: None for the defaults, or exactly three numbers

        Raises:
            ShapeError: If params does not hold exactly three values
        """
        if params is None:
            return cls()

        values = tuple(params)
        if len(values) != DefaultShape.PARAM_COUNT:
            raise ShapeError(
                f"invalid parameters: expected {DefaultShape.PARAM_COUNT} values "
                f"(x_extent, y_extent, curvature_constant), got {len(values)}"
            )
        x_extent, y_extent, constant = (float(v) for v in values)
        return cls(x_extent, y_extent, constant)


# =============================================================================
# Curve Base Class
# =============================================================================

@dataclass(frozen=True)
class Curve(ABC):
    """Abstract base class for curve families.

    Attributes:
        params: Shape of the curve
        step: Index distance covered per advance
    """
    params: ShapeParameters = field(default_factory=ShapeParameters)
    step: float = 1.0

    def __post_init__(self):
        if not np.isfinite(self.step) or self.step <= 0:
            raise ShapeError(f"step = {self.step} must be a positive finite number")
        if self.params.curvature_constant < 1.0:
            raise ShapeError(
                f"curvature_constant = {self.params.curvature_constant} must be >= 1 "
                f"(negative radicand near x_extent)"
            )

    @property
    @abstractmethod
    def name(self) -> str:
        """Family name as accepted by make_curve()."""
        pass

    @property
    @abstractmethod
    def render_extent(self) -> float:
        """Half-span of the axis the rasterizer scales against."""
        pass

    @property
    def render_span(self) -> float:
        """Nominal render range [0, render_span]."""
        return 2.0 * self.params.y_extent

    def with_step(self, step: float) -> "Curve":
        """Return a copy of this curve that advances by `step` per frame."""
        return replace(self, step=step)

    def evaluate(self, index, direction, reversal_sign: int = 1) -> np.ndarray:
        """Render position at the given index positions (no advancing).

        Args:
            index: Index positions in [0, x_extent]
            direction: Directions (+1/-1)
            reversal_sign: Run-level half-cycle flag (+1/-1)
        """
        ratio = np.asarray(index, dtype=np.float64) / self.params.x_extent
        under_root = self.params.curvature_constant - ratio ** 2
        radius = np.sqrt(under_root)
        return (1.0 - np.asarray(direction) * radius * reversal_sign) * self.params.y_extent

    def advance_arrays(
        self,
        index: np.ndarray,
        direction: np.ndarray,
        reversal_sign: int,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Advance a batch of points one step along the curve.

        Direction is reflected before the index moves: at or past x_extent
        it becomes -1, at or below 0 it becomes +1 (the lower bound is
        checked last and wins). The advanced index is clamped into
        [0, x_extent] so the curve is never evaluated outside its domain.

        Args:
            index: Index positions
            direction: Directions (+1/-1)
            reversal_sign: Run-level half-cycle flag (+1/-1)

        Returns:
            (index, render, direction) arrays for the next frame
        """
        if reversal_sign not in (1, -1):
            raise ValueError(f"reversal_sign must be +1 or -1, got {reversal_sign}")

        x_extent = self.params.x_extent
        index = np.asarray(index, dtype=np.float64)
        direction = np.asarray(direction, dtype=np.int64)

        direction = np.where(index >= x_extent, -1, direction)
        direction = np.where(index <= 0.0, 1, direction)

        index = np.clip(index + direction * self.step, 0.0, x_extent)

        render = self.evaluate(index, direction, reversal_sign)

        return index, render, direction

    def advance(self, point: Point, reversal_sign: int = 1) -> Point:
        """Compute the next state of a single point.

        Pure: the same point and reversal sign always give the same result.
        """
        index, render, direction = self.advance_arrays(
            np.asarray(point.index_position),
            np.asarray(point.direction),
            reversal_sign,
        )
        return Point(
            index_position=float(index),
            render_position=float(render),
            direction=int(direction),
        )


# =============================================================================
# Concrete Curve Families
# =============================================================================

@dataclass(frozen=True)
class Ellipse(Curve):
    """Elliptical arc, rasterized against y_extent."""

    @property
    def name(self) -> str:
        return "ellipse"

    @property
    def render_extent(self) -> float:
        return self.params.y_extent


@dataclass(frozen=True)
class Parabola(Curve):
    """Parabolic family, rasterized against x_extent.

    Render positions stay in [0, 2 * y_extent] while the columns spread
    over 2 * x_extent, so a wide parabola draws a compressed arc.
    """

    @property
    def name(self) -> str:
        return "parabola"

    @property
    def render_extent(self) -> float:
        return self.params.x_extent


# =============================================================================
# Factory
# =============================================================================

CURVES: Dict[str, Type[Curve]] = {
    "ellipse": Ellipse,
    "parabola": Parabola,
}


def make_curve(
    kind: str = "ellipse",
    params: Optional[Sequence[float]] = None,
    step: float = 1.0,
) -> Curve:
    """Construct a curve family by name.

    Args:
        kind: "ellipse" or "parabola" (case-insensitive)
        params: None for the default shape, or an (x, y, c) sequence
        step: Index distance per advance

    Raises:
        ShapeError: Unknown family or malformed parameters
    """
    try:
        cls = CURVES[kind.lower()]
    except KeyError:
        raise ShapeError(
            f"Unknown curve family: {kind!r} (expected one of {', '.join(CURVES)})"
        ) from None
    return cls(ShapeParameters.from_sequence(params), step)
