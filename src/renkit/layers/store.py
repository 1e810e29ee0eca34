"""
In-memory chunk store.

A `ChunkStore` is owned by whoever loads an area: it is filled by a loader,
read by the compositor and dropped once the layers have been produced.
"""

import logging
from typing import Dict, Iterator, Optional

from PIL import Image

from ..errors import MissingChunkError
from .models import ChunkKey, LayerKind


class ChunkStore:
    """Maps `ChunkKey` -> chunk image.

    Keys are structured, so chunks of several areas can live in one store
    without name collisions. Images are never modified by the store's users.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._chunks: Dict[ChunkKey, Image.Image] = {}

    def add(self, key: ChunkKey, image: Image.Image) -> None:
        """Add or replace a chunk."""
        if key in self._chunks:
            self.logger.debug(f"Replacing chunk {key.stem}")
        self._chunks[key] = image

    def get(self, key: ChunkKey) -> Image.Image:
        """Return the chunk for key.

        Raises:
            MissingChunkError: If the chunk was never added
        """
        image = self._chunks.get(key)
        if image is None:
            raise MissingChunkError(key)
        return image

    def find(self, key: ChunkKey) -> Optional[Image.Image]:
        """Return the chunk for key, or None if absent."""
        return self._chunks.get(key)

    def chunk(self, area: str, kind: LayerKind, row: int, col: int) -> Image.Image:
        """Shortcut for `get` with a grid position."""
        return self.get(ChunkKey(area=area, kind=kind, row=row, col=col))

    def thumbnail(self, area: str) -> Image.Image:
        """Return the pre-made thumbnail of an area."""
        return self.get(ChunkKey.thumbnail(area))

    def discard_area(self, area: str) -> int:
        """Drop every chunk of an area. Returns the number removed."""
        keys = [key for key in self._chunks if key.area == area]
        for key in keys:
            del self._chunks[key]
        self.logger.debug(f"Discarded {len(keys)} chunks of {area!r}")
        return len(keys)

    def clear(self) -> None:
        self._chunks.clear()

    def keys(self) -> Iterator[ChunkKey]:
        return iter(list(self._chunks))

    def __contains__(self, key: object) -> bool:
        return key in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)
