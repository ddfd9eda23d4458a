"""Animation queue and playback cursor."""
from __future__ import annotations

from dataclasses import dataclass, replace

from combo_dance.catalog import AnimationCatalog
from combo_dance.types import IDLE_CURSOR, ClipIndex, LoopMode, Phase


@dataclass(frozen=True)
class Playlist:
    """Ordered clips earned this session and the cursor into them.

    ``cursor`` is -1 (idle) or a valid queue index. While the end-move clip
    plays, ``on_end_move`` is set and ``cursor`` keeps the last queue index;
    the end move is a flag rather than a cursor value so it can never be
    mistaken for a queued clip.
    """

    queue: tuple[ClipIndex, ...] = ()
    cursor: int = IDLE_CURSOR
    on_end_move: bool = False

    @property
    def idle(self) -> bool:
        return self.cursor == IDLE_CURSOR and not self.on_end_move

    @property
    def last_index(self) -> int:
        return len(self.queue) - 1

    def queue_cursor(self, catalog: AnimationCatalog) -> int:
        """Cursor as reported to displays: the end-move index while winding down."""
        if self.on_end_move:
            return catalog.end_move_index
        return self.cursor

    def push(self, clip: ClipIndex) -> Playlist:
        return replace(self, queue=self.queue + (clip,))

    def kick(self) -> Playlist:
        """Start the first queued clip when idle with something queued."""
        if self.idle and self.queue:
            return replace(self, cursor=0)
        return self

    def on_clip_finished(self, ending: bool) -> Playlist:
        """Advance after the playback engine reports a ONCE clip finished."""
        if self.on_end_move:
            return replace(self, cursor=IDLE_CURSOR, on_end_move=False)

        if ending:
            if self.cursor == IDLE_CURSOR:
                return self
            if self.cursor + 1 < len(self.queue):
                return replace(self, cursor=self.cursor + 1)
            return replace(self, on_end_move=True)

        if self.cursor + 1 < len(self.queue):
            return replace(self, cursor=self.cursor + 1)
        if self.queue:
            # Hold the last clip instead of restarting the queue.
            return replace(self, cursor=self.last_index)
        return replace(self, cursor=IDLE_CURSOR)

    def clip_to_play(self, catalog: AnimationCatalog) -> ClipIndex:
        if self.on_end_move:
            return catalog.end_move_index
        if 0 <= self.cursor < len(self.queue):
            return self.queue[self.cursor]
        return catalog.idle_index

    def loop_mode(self, phase: Phase) -> LoopMode:
        if phase is Phase.READY or self.idle:
            return LoopMode.REPEAT
        if (
            not self.on_end_move
            and self.cursor == self.last_index
            and phase is not Phase.ENDING
        ):
            return LoopMode.REPEAT
        return LoopMode.ONCE

    def remaining(self) -> int:
        """Queued clips not yet finished, counting the one playing."""
        if self.cursor == IDLE_CURSOR or self.on_end_move:
            return 0
        return max(0, len(self.queue) - self.cursor)
