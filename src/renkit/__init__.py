"""
renkit: map layer extraction and sprite animation for a 2D game renderer.

Stitches chunked area graphics into full layer images and schedules sprite
animation frames.
"""

__version__ = "0.1.0"
__author__ = "renkit Contributors"

from .errors import (
    DimensionMismatchError, InvalidClipError, MissingChunkError, RenkitError
)
from .layers import (
    Area, AreaLayers, AreaTable, ChunkKey, ChunkLoader, ChunkStore,
    LayerCompositor, LayerKind, LayerWriter, load_area_layers
)
from .animation import (
    AnimationClip, AnimationManager, AnimationPlayer, AnimationState,
    ClipLoader, FrameStrip, PlaybackPolicy, advance, current_frame
)

__all__ = [
    # Errors
    'RenkitError',
    'MissingChunkError',
    'DimensionMismatchError',
    'InvalidClipError',

    # Layers
    'Area',
    'AreaLayers',
    'AreaTable',
    'ChunkKey',
    'ChunkLoader',
    'ChunkStore',
    'LayerCompositor',
    'LayerKind',
    'LayerWriter',
    'load_area_layers',

    # Animation
    'AnimationClip',
    'AnimationManager',
    'AnimationPlayer',
    'AnimationState',
    'ClipLoader',
    'FrameStrip',
    'PlaybackPolicy',
    'advance',
    'current_frame',
]
