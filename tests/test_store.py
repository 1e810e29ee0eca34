"""Tests for chunk addressing and the chunk store."""

import pytest
from PIL import Image

from renkit.errors import MissingChunkError
from renkit.layers import Area, ChunkKey, ChunkStore, LayerKind


class TestLayerKind:
    """Layer kind metadata."""

    def test_from_tag(self) -> None:
        """Kinds are found by their file tag."""
        assert LayerKind.from_tag("HGT") is LayerKind.HEIGHT
        assert LayerKind.from_tag("BKGSM") is LayerKind.BACKGROUND_SMALL
        with pytest.raises(ValueError):
            LayerKind.from_tag("XYZ")

    def test_half_resolution(self) -> None:
        """Only normal and auxiliary layers are half size."""
        assert LayerKind.NORMAL.half_resolution
        assert LayerKind.AUXILIARY.half_resolution
        assert not LayerKind.BACKGROUND.half_resolution
        assert not LayerKind.HEIGHT.half_resolution


class TestChunkKey:
    """Chunk naming."""

    def test_grid_chunk_file_name(self) -> None:
        """Grid chunks use zero-padded row and column."""
        key = ChunkKey("1501_yenwood", LayerKind.BACKGROUND, row=2, col=1)
        assert key.file_name == "1501_yenwood_BKG_R002_C001.png"

    def test_thumbnail_file_name(self) -> None:
        """The thumbnail has no grid suffix."""
        assert ChunkKey.thumbnail("1501_yenwood").file_name == "1501_yenwood_BKGSM.png"

    def test_layer_file_names(self) -> None:
        """Produced files use the layer name."""
        area = Area(name="1501_yenwood", rows=3, cols=4)
        assert area.layer_file_name(LayerKind.AUXILIARY) == "1501_yenwood_as.png"
        assert area.layer_file_name(LayerKind.BACKGROUND_SMALL) == "1501_yenwood_thumb.png"

    def test_cells_bottom_row_first(self) -> None:
        """Cells are visited from the bottom row up."""
        area = Area(name="a", rows=2, cols=2)
        assert list(area.cells()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


class TestChunkStore:
    """Store operations."""

    def test_add_and_get(self) -> None:
        """Added chunks are returned by position."""
        store = ChunkStore()
        image = Image.new("RGBA", (4, 4))
        store.add(ChunkKey("a", LayerKind.HEIGHT, 0, 0), image)

        assert store.chunk("a", LayerKind.HEIGHT, 0, 0) is image
        assert ChunkKey("a", LayerKind.HEIGHT, 0, 0) in store
        assert len(store) == 1

    def test_missing_chunk(self) -> None:
        """A missing chunk raises and find returns None."""
        store = ChunkStore()
        with pytest.raises(MissingChunkError) as exc_info:
            store.chunk("a", LayerKind.NORMAL, 3, 4)
        assert "a_NM_R003_C004.png" in str(exc_info.value)
        assert store.find(ChunkKey("a", LayerKind.NORMAL, 3, 4)) is None

    def test_areas_do_not_collide(self) -> None:
        """Chunks at the same position of different areas are kept apart."""
        store = ChunkStore()
        first = Image.new("RGBA", (1, 1), (1, 0, 0, 255))
        second = Image.new("RGBA", (1, 1), (2, 0, 0, 255))
        store.add(ChunkKey("a", LayerKind.BACKGROUND, 0, 0), first)
        store.add(ChunkKey("b", LayerKind.BACKGROUND, 0, 0), second)

        assert store.chunk("a", LayerKind.BACKGROUND, 0, 0) is first
        assert store.chunk("b", LayerKind.BACKGROUND, 0, 0) is second

    def test_discard_area(self) -> None:
        """Discarding an area keeps other areas' chunks."""
        store = ChunkStore()
        for row in range(2):
            store.add(ChunkKey("a", LayerKind.HEIGHT, row, 0), Image.new("RGBA", (1, 1)))
        store.add(ChunkKey.thumbnail("a"), Image.new("RGBA", (1, 1)))
        store.add(ChunkKey("b", LayerKind.HEIGHT, 0, 0), Image.new("RGBA", (1, 1)))

        assert store.discard_area("a") == 3
        assert len(store) == 1
        assert list(store.keys()) == [ChunkKey("b", LayerKind.HEIGHT, 0, 0)]

    def test_thumbnail_lookup(self) -> None:
        """The thumbnail is looked up by area."""
        store = ChunkStore()
        thumb = Image.new("RGBA", (3, 2))
        store.add(ChunkKey.thumbnail("a"), thumb)
        assert store.thumbnail("a") is thumb
