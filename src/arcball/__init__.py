"""Arcball - points bouncing along a curve, rendered as terminal text."""

from loguru import logger

from .config import AnimationConfig, TrailMode
from .constants import RUN_FOREVER
from .curves import ShapeParameters, Curve, Ellipse, Parabola, make_curve
from .errors import ArcballError, ConfigurationError, ShapeError
from .points import Point, PointTrail
from .render import rasterize, LineWriter
from .animations import Animation, AnimationState, Frame

__version__ = "0.1.0"

# Silent unless the application opts in with logger.enable("arcball")
logger.disable("arcball")

__all__ = [
    "AnimationConfig",
    "TrailMode",
    "RUN_FOREVER",
    "ShapeParameters",
    "Curve",
    "Ellipse",
    "Parabola",
    "make_curve",
    "ArcballError",
    "ConfigurationError",
    "ShapeError",
    "Point",
    "PointTrail",
    "rasterize",
    "LineWriter",
    "Animation",
    "AnimationState",
    "Frame",
]
