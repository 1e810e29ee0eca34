"""
Animation clip and playback state models.

A clip is immutable configuration shared by every entity playing it; the
state is the mutable per-instance data advanced by the scheduler.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import InvalidClipError


class PlaybackPolicy(Enum):
    """How the frame index moves when a clip advances."""

    ONCE = "once"
    """Play each frame once, then stop on the last frame."""

    LOOP = "loop"
    """Wrap to the first frame after the last one."""

    BACK_AND_FORTH = "back_and_forth"
    """Bounce between the first and last frame."""

    STILL = "still"
    """Never advance."""


@dataclass(frozen=True)
class AnimationClip:
    """Sprite animation configuration.

    Attributes:
        name: Clip identifier
        first_frame: Offset of frame 0 in the shared frame strip
        frame_count: Number of frames in the clip
        duration: Total playback duration, in the caller's time unit
        policy: Playback policy
        increment: Initial direction (+1 or -1) for back-and-forth clips
    """

    name: str
    first_frame: int
    frame_count: int
    duration: float
    policy: PlaybackPolicy = PlaybackPolicy.LOOP
    increment: int = 1

    @property
    def frame_duration(self) -> float:
        """Time each frame stays on screen.

        Raises:
            InvalidClipError: If the clip has no frames
        """
        if self.frame_count <= 0:
            raise InvalidClipError(self.name, f"frame count must be positive, got {self.frame_count}")
        return self.duration / self.frame_count

    def validate(self) -> None:
        """Check that the clip can be played.

        Raises:
            InvalidClipError: On the first problem found
        """
        if self.frame_count <= 0:
            raise InvalidClipError(self.name, f"frame count must be positive, got {self.frame_count}")
        if self.duration < 0:
            raise InvalidClipError(self.name, f"duration must not be negative, got {self.duration}")
        if self.first_frame < 0:
            raise InvalidClipError(self.name, f"first frame must not be negative, got {self.first_frame}")
        if self.policy is PlaybackPolicy.BACK_AND_FORTH and self.increment == 0:
            raise InvalidClipError(self.name, "back-and-forth increment must not be zero")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnimationClip":
        """Create an AnimationClip from a JSON dict.

        Args:
            data: Dict with name, first_frame, frame_count, duration, policy
                and optional increment

        Returns:
            AnimationClip instance
        """
        return cls(
            name=str(data["name"]),
            first_frame=int(data.get("first_frame", 0)),
            frame_count=int(data["frame_count"]),
            duration=float(data["duration"]),
            policy=PlaybackPolicy(data.get("policy", PlaybackPolicy.LOOP.value)),
            increment=int(data.get("increment", 1)),
        )


@dataclass
class AnimationState:
    """Runtime state of one playing clip instance.

    `increment` starts from the clip's increment and is flipped by
    back-and-forth playback. `playing` only turns False for Once clips.
    """

    frame: int = 0
    last_advance: float = 0.0
    increment: int = 1
    playing: bool = True

    @classmethod
    def start(cls, clip: AnimationClip, now: float) -> "AnimationState":
        """Create the state of a clip that begins playing at `now`."""
        return cls(frame=0, last_advance=now, increment=clip.increment, playing=True)

    def reset(self, clip: AnimationClip, now: float) -> None:
        """Restart playback from frame 0."""
        self.frame = 0
        self.last_advance = now
        self.increment = clip.increment
        self.playing = True
