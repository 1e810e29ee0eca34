"""
Layer compositor.

Stitches the chunk grid of an area into one image per layer kind. Row 0 is
the bottom row of the area, so rows are written from the last row down to
row 0: pixel row 0 of the output belongs to the topmost source row.
"""

import logging
from typing import Optional, Tuple

from PIL import Image

from ..errors import DimensionMismatchError
from .models import Area, AreaLayers, LayerKind
from .store import ChunkStore


class LayerCompositor:
    """Composites area layers from a chunk store.

    Chunks in one row are expected to share their height and chunks in one
    column their width. Row widths and column heights are always checked;
    the per-cell alignment is only checked when `strict` is set, otherwise
    it is a precondition on the assets.
    """

    def __init__(self, store: ChunkStore, strict: bool = False):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.store = store
        self.strict = strict

    def compute_width(self, area: Area, kind: LayerKind) -> int:
        """Compute the pixel width of a layer from its chunk grid.

        Every row must add up to the same width.

        Raises:
            MissingChunkError: If a chunk of the grid is missing
            DimensionMismatchError: If a row sum differs from the first row's
        """
        width: Optional[int] = None
        for row in range(area.rows):
            w = 0
            for col in range(area.cols):
                w += self.store.chunk(area.name, kind, row, col).width
            if width is None:
                width = w
            elif w != width:
                raise DimensionMismatchError(area.name, kind, "width", row, width, w)
        return width or 0

    def compute_height(self, area: Area, kind: LayerKind) -> int:
        """Compute the pixel height of a layer from its chunk grid.

        Every column must add up to the same height.

        Raises:
            MissingChunkError: If a chunk of the grid is missing
            DimensionMismatchError: If a column sum differs from the first column's
        """
        height: Optional[int] = None
        for col in range(area.cols):
            h = 0
            for row in range(area.rows):
                h += self.store.chunk(area.name, kind, row, col).height
            if height is None:
                height = h
            elif h != height:
                raise DimensionMismatchError(area.name, kind, "height", col, height, h)
        return height or 0

    def check_alignment(self, area: Area, kind: LayerKind) -> None:
        """Verify that rows share a chunk height and columns a chunk width.

        Raises:
            DimensionMismatchError: On the first chunk breaking the grid
        """
        for row in range(area.rows):
            expected: Optional[int] = None
            for col in range(area.cols):
                h = self.store.chunk(area.name, kind, row, col).height
                if expected is None:
                    expected = h
                elif h != expected:
                    raise DimensionMismatchError(
                        area.name, kind, "row height", row, expected, h
                    )
        for col in range(area.cols):
            expected = None
            for row in range(area.rows):
                w = self.store.chunk(area.name, kind, row, col).width
                if expected is None:
                    expected = w
                elif w != expected:
                    raise DimensionMismatchError(
                        area.name, kind, "column width", col, expected, w
                    )

    def composite_layer(
        self, area: Area, kind: LayerKind, width: int, height: int
    ) -> Image.Image:
        """Copy every chunk of a layer into a new width x height image.

        Chunks are pasted without blending. The cursor moves right by each
        chunk's width and down by the height of the last chunk of each row.
        """
        dst = Image.new("RGBA", (width, height))
        y = 0
        for row in range(area.rows - 1, -1, -1):
            x = 0
            src_height = 0
            for col in range(area.cols):
                src = self.store.chunk(area.name, kind, row, col)
                dst.paste(src, (x, y))
                x += src.width
                src_height = src.height
            y += src_height
        return dst

    def full_size(self, area: Area) -> Tuple[int, int]:
        """Full-resolution (width, height) of an area, measured on its background."""
        return (
            self.compute_width(area, LayerKind.BACKGROUND),
            self.compute_height(area, LayerKind.BACKGROUND),
        )

    def render_layer(self, area: Area, kind: LayerKind) -> Image.Image:
        """Produce the layer image of one kind.

        Background and height layers use the full area size, normal and
        auxiliary layers half of it (their chunks are already half size).
        The thumbnail is not composited but returned as stored.
        """
        if kind.is_thumbnail:
            return self.store.thumbnail(area.name).copy()
        return self._render_sized(area, kind, self.full_size(area))

    def render_area(self, area: Area, include_thumbnail: bool = False) -> AreaLayers:
        """Render all composited layers of an area in one pass."""
        size = self.full_size(area)
        self.logger.info(f"Rendering layers of {area.name!r} ({size[0]}x{size[1]})")
        thumbnail = None
        if include_thumbnail:
            thumbnail = self.render_layer(area, LayerKind.BACKGROUND_SMALL)
        return AreaLayers(
            area=area,
            background=self._render_sized(area, LayerKind.BACKGROUND, size),
            normal=self._render_sized(area, LayerKind.NORMAL, size),
            height=self._render_sized(area, LayerKind.HEIGHT, size),
            auxiliary=self._render_sized(area, LayerKind.AUXILIARY, size),
            thumbnail=thumbnail,
        )

    def _render_sized(
        self, area: Area, kind: LayerKind, full_size: Tuple[int, int]
    ) -> Image.Image:
        width, height = full_size
        if kind.half_resolution:
            width, height = width // 2, height // 2
        if self.strict:
            self.check_alignment(area, kind)
        self.logger.debug(f"Compositing {kind.layer_name} layer of {area.name!r}: {width}x{height}")
        return self.composite_layer(area, kind, width, height)
