"""Next-clip selection with graduated anti-repeat."""
from __future__ import annotations

import random
from typing import Sequence

from combo_dance.catalog import AnimationCatalog
from combo_dance.types import ClipIndex


def select_next(
    catalog: AnimationCatalog,
    queue: Sequence[ClipIndex],
    queue_cursor: int,
    rng: random.Random,
) -> ClipIndex | None:
    """Pick the clip to queue after a completed combo.

    With more than two eligible clips both the last queued clip and the one
    playing now are avoided; with two, only the last queued one; with one,
    it is reused. Returns None only when no clip is eligible at all.
    """
    pool = catalog.eligible()
    if not pool:
        return None

    last = queue[-1] if queue else None
    current = queue[queue_cursor] if 0 <= queue_cursor < len(queue) else None

    candidates = pool
    if len(pool) > 2 and last is not None and current is not None:
        candidates = [i for i in pool if i != last and i != current]
    elif len(pool) > 1 and last is not None:
        candidates = [i for i in pool if i != last]

    return rng.choice(candidates)
