"""
Data models for area layers and their chunks.

Contains the layer kind enumeration, chunk addressing and the containers for
composited layers. No file-system or compositing logic lives here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from PIL import Image


class LayerKind(Enum):
    """Layer kind of an area.

    Each member carries the tag used in chunk file names and the name used
    for produced layer files.
    """

    BACKGROUND = ("BKG", "background")
    BACKGROUND_SMALL = ("BKGSM", "thumb")
    NORMAL = ("NM", "normal")
    HEIGHT = ("HGT", "height")
    AUXILIARY = ("AS", "as")

    def __init__(self, tag: str, layer_name: str):
        self.tag = tag
        self.layer_name = layer_name

    @property
    def half_resolution(self) -> bool:
        """Whether chunks of this kind are stored at half the linear resolution."""
        return self in (LayerKind.NORMAL, LayerKind.AUXILIARY)

    @property
    def is_thumbnail(self) -> bool:
        return self is LayerKind.BACKGROUND_SMALL

    @classmethod
    def from_tag(cls, tag: str) -> "LayerKind":
        """Look up a kind by its chunk file tag (e.g. "HGT")."""
        for kind in cls:
            if kind.tag == tag:
                return kind
        raise ValueError(f"unknown layer kind tag: {tag!r}")


# Kinds stitched from a chunk grid, in render order.
COMPOSITED_KINDS: Tuple[LayerKind, ...] = (
    LayerKind.BACKGROUND,
    LayerKind.NORMAL,
    LayerKind.HEIGHT,
    LayerKind.AUXILIARY,
)


@dataclass(frozen=True)
class ChunkKey:
    """Identity of one chunk image.

    Row 0, column 0 is the bottom-left chunk of the area. The thumbnail has
    no grid position and leaves row and col unset.
    """

    area: str
    kind: LayerKind
    row: Optional[int] = None
    col: Optional[int] = None

    @classmethod
    def thumbnail(cls, area: str) -> "ChunkKey":
        return cls(area=area, kind=LayerKind.BACKGROUND_SMALL)

    @property
    def stem(self) -> str:
        """Chunk name without extension, e.g. "yenwood_BKG_R002_C001"."""
        if self.row is None or self.col is None:
            return f"{self.area}_{self.kind.tag}"
        return f"{self.area}_{self.kind.tag}_R{self.row:03d}_C{self.col:03d}"

    @property
    def file_name(self) -> str:
        return f"{self.stem}.png"


@dataclass(frozen=True)
class Area:
    """A named map region made of rows x cols chunks."""

    name: str
    rows: int
    cols: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate (row, col) pairs in row-major order, bottom row first."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def chunk_key(self, kind: LayerKind, row: int, col: int) -> ChunkKey:
        return ChunkKey(area=self.name, kind=kind, row=row, col=col)

    def layer_file_name(self, kind: LayerKind) -> str:
        """File name of a produced layer, e.g. "yenwood_height.png"."""
        return f"{self.name}_{kind.layer_name}.png"


@dataclass
class AreaLayers:
    """Composited layer images of one area.

    Produced by a render pass and handed to a writer or a renderer. The
    images are treated as read-only once the pass has completed.
    """

    area: Area
    background: Image.Image
    normal: Image.Image
    height: Image.Image
    auxiliary: Image.Image
    thumbnail: Optional[Image.Image] = None

    def get(self, kind: LayerKind) -> Optional[Image.Image]:
        """Return the layer image for a kind (thumbnail may be None)."""
        return {
            LayerKind.BACKGROUND: self.background,
            LayerKind.BACKGROUND_SMALL: self.thumbnail,
            LayerKind.NORMAL: self.normal,
            LayerKind.HEIGHT: self.height,
            LayerKind.AUXILIARY: self.auxiliary,
        }[kind]

    def items(self) -> Iterator[Tuple[LayerKind, Image.Image]]:
        """Iterate (kind, image) for every present layer, thumbnail last."""
        for kind in COMPOSITED_KINDS:
            image = self.get(kind)
            if image is not None:
                yield kind, image
        if self.thumbnail is not None:
            yield LayerKind.BACKGROUND_SMALL, self.thumbnail
