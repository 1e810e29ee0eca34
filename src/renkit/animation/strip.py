"""Frame strips: sprite images laid out as one row of frames per facing direction."""

from dataclasses import dataclass, field
from typing import List

from PIL import Image


@dataclass
class FrameStrip:
    """Sliced frame strip.

    The image is cut into frame_width x frame_height cells on construction.
    Rows are facing directions, columns are frames; clips address columns
    through their first_frame offset.
    """

    image: Image.Image
    frame_width: int
    frame_height: int
    frames: List[List[Image.Image]] = field(init=False, default_factory=lambda: [])

    def __post_init__(self):
        if self.frame_width <= 0 or self.frame_height <= 0:
            raise ValueError(
                f"frame size must be positive, got {self.frame_width}x{self.frame_height}"
            )
        self._precut_all()

    def _precut_all(self):
        """Slice the strip image into rows of frames.

        Partial cells at the right or bottom edge are dropped.
        """
        self.frames = []
        img_width, img_height = self.image.size
        cols = img_width // self.frame_width
        rows = img_height // self.frame_height

        for y in range(rows):
            row: List[Image.Image] = []
            for x in range(cols):
                left = x * self.frame_width
                top = y * self.frame_height
                row.append(
                    self.image.crop(
                        (left, top, left + self.frame_width, top + self.frame_height)
                    )
                )
            self.frames.append(row)

    @property
    def directions(self) -> int:
        return len(self.frames)

    @property
    def frames_per_direction(self) -> int:
        return len(self.frames[0]) if self.frames else 0

    def frame(self, index: int, direction: int = 0) -> Image.Image | None:
        """Return a frame by strip index and direction, or None if out of range."""
        if 0 <= direction < len(self.frames):
            row = self.frames[direction]
            if 0 <= index < len(row):
                return row[index]
        return None
