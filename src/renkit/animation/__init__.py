"""
Sprite animation.

Clip definitions, the fixed-period frame scheduler and frame strip slicing.
"""

from .models import AnimationClip, AnimationState, PlaybackPolicy
from .scheduler import AnimationManager, AnimationPlayer, advance, current_frame
from .strip import FrameStrip
from .loader import ClipLoader, ClipSchema

__all__ = [
    "AnimationClip",
    "AnimationManager",
    "AnimationPlayer",
    "AnimationState",
    "ClipLoader",
    "ClipSchema",
    "FrameStrip",
    "PlaybackPolicy",
    "advance",
    "current_frame",
]
