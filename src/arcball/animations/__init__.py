"""Frame loop for the bouncing-point animation."""

from ..config import TrailMode
from .loop import (
    Animation,
    AnimationState,
    Frame,
)

__all__ = [
    "Animation",
    "AnimationState",
    "Frame",
    "TrailMode",
]
