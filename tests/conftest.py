"""Shared fixtures for renkit tests."""

from pathlib import Path
from typing import Callable, List, Tuple

import pytest
from PIL import Image

from renkit.layers import Area, ChunkKey, ChunkStore, LayerKind

Size = Tuple[int, int]


def chunk_color(row: int, col: int) -> Tuple[int, int, int, int]:
    """Distinct opaque colour per grid cell."""
    return (10 + row * 40, 10 + col * 40, 100, 255)


@pytest.fixture
def fill_grid() -> Callable[..., None]:
    """Add solid-colour chunks to a store.

    sizes[row][col] is the (width, height) of the chunk at that cell.
    """

    def _fill(
        store: ChunkStore, area: str, kind: LayerKind, sizes: List[List[Size]]
    ) -> None:
        for row, row_sizes in enumerate(sizes):
            for col, size in enumerate(row_sizes):
                store.add(
                    ChunkKey(area=area, kind=kind, row=row, col=col),
                    Image.new("RGBA", size, chunk_color(row, col)),
                )

    return _fill


@pytest.fixture
def uniform_area_store(fill_grid: Callable[..., None]) -> Tuple[Area, ChunkStore]:
    """2x2 area with 64px background/height chunks and 32px normal/aux chunks."""
    area = Area(name="yenwood", rows=2, cols=2)
    store = ChunkStore()
    full = [[(64, 64)] * 2] * 2
    half = [[(32, 32)] * 2] * 2
    fill_grid(store, area.name, LayerKind.BACKGROUND, full)
    fill_grid(store, area.name, LayerKind.HEIGHT, full)
    fill_grid(store, area.name, LayerKind.NORMAL, half)
    fill_grid(store, area.name, LayerKind.AUXILIARY, half)
    return area, store


@pytest.fixture
def write_chunks() -> Callable[..., None]:
    """Write the PNG chunks of an area (all composited kinds) into a directory."""

    def _write(directory: Path, area: Area, full: int = 16, thumbnail: bool = False) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        for row, col in area.cells():
            for kind in (LayerKind.BACKGROUND, LayerKind.HEIGHT, LayerKind.NORMAL, LayerKind.AUXILIARY):
                size = full // 2 if kind.half_resolution else full
                key = area.chunk_key(kind, row, col)
                Image.new("RGB", (size, size), chunk_color(row, col)[:3]).save(
                    directory / key.file_name
                )
        if thumbnail:
            Image.new("RGB", (8, 6), (1, 2, 3)).save(
                directory / ChunkKey.thumbnail(area.name).file_name
            )

    return _write


class FakeClock:
    """Manually advanced clock for animation tests."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
