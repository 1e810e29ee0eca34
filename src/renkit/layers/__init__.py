"""
Area layer extraction.

Loads the chunk grids of map areas, stitches them into one image per layer
kind and writes the results.
"""

from .models import COMPOSITED_KINDS, Area, AreaLayers, ChunkKey, LayerKind
from .store import ChunkStore
from .compositor import LayerCompositor
from .loader import ChunkLoader, load_area_layers
from .writer import LayerWriter
from .areas import AreaSchema, AreaTable

__all__ = [
    "COMPOSITED_KINDS",
    "Area",
    "AreaLayers",
    "AreaSchema",
    "AreaTable",
    "ChunkKey",
    "ChunkLoader",
    "ChunkStore",
    "LayerCompositor",
    "LayerKind",
    "LayerWriter",
    "load_area_layers",
]
