"""
Loading of chunk images and produced layer files from disk.

Chunks are decoded in parallel (IO-bound) and registered in a fresh
`ChunkStore` afterwards, so the store itself is only touched by one thread.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Tuple

from PIL import Image

from ..errors import MissingChunkError
from .models import COMPOSITED_KINDS, Area, AreaLayers, ChunkKey, LayerKind
from .store import ChunkStore

logger = logging.getLogger(__name__)


def read_image(path: Path) -> Image.Image:
    """Decode an image file fully into an RGBA image."""
    with Image.open(path) as img:
        return img.convert("RGBA")


class ChunkLoader:
    """Reads the chunks of an area from a chunk directory.

    A chunk is looked up as `<chunks_dir>/<area>/<file>` first and
    `<chunks_dir>/<file>` second, so both per-area subdirectories and one
    flat directory of extracted assets work.
    """

    def __init__(self, chunks_dir: Path, max_workers: int = 4):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.chunks_dir = Path(chunks_dir)
        self.max_workers = max(1, max_workers)

    def chunk_path(self, key: ChunkKey) -> Path:
        """Resolve the file of a chunk.

        Raises:
            MissingChunkError: If neither location holds the file
        """
        for candidate in (
            self.chunks_dir / key.area / key.file_name,
            self.chunks_dir / key.file_name,
        ):
            if candidate.is_file():
                return candidate
        raise MissingChunkError(key)

    def area_keys(
        self,
        area: Area,
        kinds: Iterable[LayerKind] = COMPOSITED_KINDS,
        include_thumbnail: bool = False,
    ) -> List[ChunkKey]:
        """All chunk keys needed to render the given kinds of an area."""
        keys = [
            area.chunk_key(kind, row, col)
            for row, col in area.cells()
            for kind in kinds
            if not kind.is_thumbnail
        ]
        if include_thumbnail:
            keys.append(ChunkKey.thumbnail(area.name))
        return keys

    def load_area(
        self,
        area: Area,
        kinds: Iterable[LayerKind] = COMPOSITED_KINDS,
        include_thumbnail: bool = False,
        store: ChunkStore | None = None,
    ) -> ChunkStore:
        """Load every chunk of an area into a store.

        Args:
            area: Area to load
            kinds: Layer kinds whose grids are loaded
            include_thumbnail: Also load the pre-made thumbnail
            store: Store to fill; a new one is created when omitted

        Returns:
            The filled store

        Raises:
            MissingChunkError: If a chunk file does not exist
        """
        self.logger.info(f"Loading graphics of {area.name!r}")
        keys = self.area_keys(area, kinds, include_thumbnail)
        # Resolve paths up front so a missing chunk fails before any decoding.
        paths = [(key, self.chunk_path(key)) for key in keys]

        loaded: List[Tuple[ChunkKey, Image.Image]] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_key = {
                executor.submit(read_image, path): key for key, path in paths
            }
            for future in as_completed(future_to_key):
                loaded.append((future_to_key[future], future.result()))

        if store is None:
            store = ChunkStore()
        for key, image in loaded:
            store.add(key, image)
        self.logger.info(f"Loaded {len(loaded)} chunks of {area.name!r}")
        return store


def load_area_layers(area: Area, assets_dir: Path) -> AreaLayers:
    """Read the produced layer files of an area back from disk.

    The thumbnail is optional; the four composited layers are required.

    Raises:
        FileNotFoundError: If a composited layer file is missing
    """
    assets_dir = Path(assets_dir)
    images = {}
    for kind in COMPOSITED_KINDS:
        path = assets_dir / area.layer_file_name(kind)
        if not path.is_file():
            raise FileNotFoundError(f"Layer file not found: {path}")
        images[kind] = read_image(path)

    thumbnail = None
    thumb_path = assets_dir / area.layer_file_name(LayerKind.BACKGROUND_SMALL)
    if thumb_path.is_file():
        thumbnail = read_image(thumb_path)
    else:
        logger.debug(f"No thumbnail for {area.name!r} at {thumb_path}")

    return AreaLayers(
        area=area,
        background=images[LayerKind.BACKGROUND],
        normal=images[LayerKind.NORMAL],
        height=images[LayerKind.HEIGHT],
        auxiliary=images[LayerKind.AUXILIARY],
        thumbnail=thumbnail,
    )
