"""
Exception types raised by the compositor and the animation scheduler.

All of them are fatal for the operation in progress. Callers decide whether
to abort a whole run or skip the affected area.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .layers.models import ChunkKey, LayerKind


class RenkitError(Exception):
    """Base class for renkit errors."""
    pass


class MissingChunkError(RenkitError):
    """Raised when a required chunk is not present in the chunk store."""

    def __init__(self, key: "ChunkKey"):
        self.key = key
        super().__init__(
            f"unable to locate {key.file_name!r} (kind {key.kind.tag!r}) of {key.area!r}"
        )


class DimensionMismatchError(RenkitError):
    """Raised when chunk sizes of a grid do not add up consistently.

    Attributes:
        area: Area name
        kind: Layer kind whose chunks were measured
        axis: "width" (row sums), "height" (column sums), "row height" or
            "column width" (per-cell alignment)
        index: Offending row or column
        expected: Value established by the first row/column/chunk
        actual: Conflicting value
    """

    def __init__(
        self,
        area: str,
        kind: "LayerKind",
        axis: str,
        index: int,
        expected: int,
        actual: int,
    ):
        self.area = area
        self.kind = kind
        self.axis = axis
        self.index = index
        self.expected = expected
        self.actual = actual
        where = "column" if axis in ("height", "column width") else "row"
        super().__init__(
            f"mismatch between {axis} of {area!r} ({kind.tag}) at {where} {index} "
            f"(prev={expected}, new={actual})"
        )


class InvalidClipError(RenkitError):
    """Raised when an animation clip cannot be played as configured."""

    def __init__(self, clip: str, reason: str):
        self.clip = clip
        self.reason = reason
        super().__init__(f"invalid animation clip {clip!r}: {reason}")
