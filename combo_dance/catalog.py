"""Animation catalog and one-time idle/end-move resolution."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from combo_dance.types import ClipIndex


@dataclass(frozen=True)
class AnimationCatalog:
    """Clip names reported by the playback engine plus the resolved roles.

    ``idle_index`` and ``end_move_index`` are resolved once at load time and
    consumed everywhere else; nothing downstream searches names again.
    """

    names: tuple[str, ...] = ()
    idle_index: ClipIndex = 0
    end_move_index: ClipIndex = 0
    excluded: frozenset[ClipIndex] = field(default_factory=frozenset)

    def __len__(self) -> int:
        return len(self.names)

    @property
    def loaded(self) -> bool:
        return bool(self.names)

    def name(self, index: ClipIndex) -> str:
        return self.names[index]

    def is_eligible(self, index: ClipIndex) -> bool:
        return (
            0 <= index < len(self.names)
            and index != self.idle_index
            and index != self.end_move_index
            and index not in self.excluded
        )

    def eligible(self) -> list[ClipIndex]:
        """Indices that may be queued, in catalog order."""
        return [i for i in range(len(self.names)) if self.is_eligible(i)]


def _find(names: tuple[str, ...], marker: str) -> int | None:
    needle = marker.lower()
    for i, name in enumerate(names):
        if needle in name.lower():
            return i
    return None


def resolve_catalog(
    names: Iterable[str],
    excluded_names: Iterable[str] = (),
    idle_marker: str = "idle",
    end_move_marker: str = "end move",
) -> AnimationCatalog:
    """Build a catalog, locating idle and end-move clips by name.

    Idle falls back to index 0 and end-move to the last clip. An empty
    catalog resolves both to 0 and has no eligible clips.
    """
    names = tuple(names)
    if not names:
        return AnimationCatalog()

    idle = _find(names, idle_marker)
    end_move = _find(names, end_move_marker)
    skip = set(excluded_names)
    return AnimationCatalog(
        names=names,
        idle_index=idle if idle is not None else 0,
        end_move_index=end_move if end_move is not None else len(names) - 1,
        excluded=frozenset(i for i, n in enumerate(names) if n in skip),
    )
