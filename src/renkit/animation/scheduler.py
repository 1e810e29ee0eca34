"""Animation scheduling.

A fixed-period scheduler: every frame of a clip is shown for
`duration / frame_count`, and each `advance` call moves at most one frame no
matter how much time has passed. Callers poll once per render tick from the
render thread; there are no timers or callbacks.
"""

import logging
import time
from typing import Callable, Dict, Hashable, Optional, Tuple

from ..errors import InvalidClipError
from .models import AnimationClip, AnimationState, PlaybackPolicy

Clock = Callable[[], float]


def _step_once(clip: AnimationClip, state: AnimationState) -> None:
    if state.frame + 1 >= clip.frame_count:
        state.playing = False
        return
    state.frame += 1


def _step_loop(clip: AnimationClip, state: AnimationState) -> None:
    state.frame += 1
    if state.frame >= clip.frame_count:
        state.frame = 0


def _step_back_and_forth(clip: AnimationClip, state: AnimationState) -> None:
    if clip.frame_count < 2:
        return
    state.frame += state.increment
    if state.frame >= clip.frame_count:
        # Bounce without showing the last frame twice.
        state.frame = clip.frame_count - 2
        state.increment = -1
    elif state.frame < 0:
        state.frame = 1
        state.increment = 1


_TRANSITIONS: Dict[PlaybackPolicy, Callable[[AnimationClip, AnimationState], None]] = {
    PlaybackPolicy.ONCE: _step_once,
    PlaybackPolicy.LOOP: _step_loop,
    PlaybackPolicy.BACK_AND_FORTH: _step_back_and_forth,
}


def advance(clip: AnimationClip, state: AnimationState, now: float) -> bool:
    """Move a clip instance to its next frame if the current one is due.

    Args:
        clip: Clip being played
        state: Runtime state of the instance, mutated in place
        now: Current time, in the same unit as `clip.duration`

    Returns:
        True if the policy's transition was applied, False if the frame is
        not due yet, the clip is still, or a Once clip has finished

    Raises:
        InvalidClipError: For a back-and-forth clip with a zero increment or
            a clip without frames
    """
    if clip.policy is PlaybackPolicy.STILL:
        return False
    if clip.policy is PlaybackPolicy.ONCE and not state.playing:
        return False
    if clip.policy is PlaybackPolicy.BACK_AND_FORTH and 0 in (clip.increment, state.increment):
        raise InvalidClipError(clip.name, "back-and-forth increment must not be zero")

    if now - state.last_advance < clip.frame_duration:
        return False

    _TRANSITIONS[clip.policy](clip, state)
    state.last_advance = now
    return True


def current_frame(clip: AnimationClip, state: AnimationState) -> Tuple[int, bool]:
    """Return (frame index within the clip, whether the clip is still playing).

    Only Once clips ever report that they stopped playing.
    """
    if clip.policy is PlaybackPolicy.ONCE:
        return state.frame, state.playing
    return state.frame, True


class AnimationPlayer:
    """One playing instance of a clip, driven by an injectable clock."""

    def __init__(self, clip: AnimationClip, clock: Clock = time.monotonic):
        clip.validate()
        self.clip = clip
        self.clock = clock
        self.state = AnimationState.start(clip, clock())

    def tick(self) -> bool:
        """Advance the instance if due. Returns True if a transition happened."""
        return advance(self.clip, self.state, self.clock())

    @property
    def frame(self) -> int:
        return current_frame(self.clip, self.state)[0]

    @property
    def playing(self) -> bool:
        return current_frame(self.clip, self.state)[1]

    @property
    def strip_index(self) -> int:
        """Index of the current frame in the shared frame strip."""
        return self.clip.first_frame + self.frame

    def reset(self) -> None:
        """Restart playback from the first frame."""
        self.state.reset(self.clip, self.clock())


class AnimationManager:
    """Owns the animation players of a scene, keyed by entity.

    The render loop calls `tick` once per frame and then reads each
    player's frame when drawing.
    """

    def __init__(self, clock: Clock = time.monotonic):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.clock = clock
        self._players: Dict[Hashable, AnimationPlayer] = {}

    def register(self, key: Hashable, clip: AnimationClip) -> AnimationPlayer:
        """Start playing a clip for key.

        Registering the same clip again keeps the running player; a different
        clip replaces it and starts from frame 0.
        """
        player = self._players.get(key)
        if player is not None and player.clip == clip:
            return player

        player = AnimationPlayer(clip, clock=self.clock)
        self._players[key] = player
        self.logger.debug(
            f"Registered animation {clip.name!r} for {key!r} "
            f"({clip.frame_count} frames, {clip.policy.value})"
        )
        return player

    def get(self, key: Hashable) -> Optional[AnimationPlayer]:
        player = self._players.get(key)
        if player is None:
            self.logger.warning(f"Attempted to get unregistered animation: {key!r}")
        return player

    def remove(self, key: Hashable) -> None:
        """Stop playing for key. Unknown keys are ignored."""
        self._players.pop(key, None)

    def tick(self) -> int:
        """Advance every player once. Returns how many advanced."""
        now = self.clock()
        advanced = 0
        for player in self._players.values():
            if advance(player.clip, player.state, now):
                advanced += 1
        return advanced

    def clear(self) -> None:
        """Drop all players, e.g. when a new area is loaded."""
        self._players.clear()
        self.logger.debug("Cleared all animation players")

    def __contains__(self, key: object) -> bool:
        return key in self._players

    def __len__(self) -> int:
        return len(self._players)
