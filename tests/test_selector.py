"""Tests for next-clip selection."""
from __future__ import annotations

import random

from combo_dance.catalog import resolve_catalog
from combo_dance.selector import select_next


def _catalog(n_dances: int, excluded: tuple[str, ...] = ()):
    names = ["Idle"] + [f"Dance{i}" for i in range(1, n_dances + 1)] + ["End Move"]
    return resolve_catalog(names + list(excluded), excluded_names=excluded)


class TestPool:
    def test_empty_pool_returns_none(self):
        cat = resolve_catalog(["Idle", "End Move"])
        assert select_next(cat, [], -1, random.Random(1)) is None

    def test_empty_catalog_returns_none(self):
        cat = resolve_catalog([])
        assert select_next(cat, [], -1, random.Random(1)) is None

    def test_never_idle_end_move_or_excluded(self):
        """Across many picks only eligible clips are returned."""
        cat = _catalog(4, excluded=("Armature.009|mixamo.com|Layer0",))
        rng = random.Random(42)
        queue: list[int] = []
        for _ in range(300):
            clip = select_next(cat, queue, len(queue) - 1, rng)
            assert clip is not None
            assert cat.is_eligible(clip)
            queue.append(clip)
        assert cat.idle_index not in queue
        assert cat.end_move_index not in queue
        assert not cat.excluded & set(queue)

    def test_first_pick_uses_whole_pool(self):
        cat = _catalog(3)
        rng = random.Random(42)
        picks = {select_next(cat, [], -1, rng) for _ in range(100)}
        assert picks == set(cat.eligible())


class TestAntiRepeat:
    def test_single_clip_repeats(self):
        """With one eligible clip it is reused rather than returning None."""
        cat = _catalog(1)
        rng = random.Random(42)
        assert select_next(cat, [1, 1], 1, rng) == 1

    def test_two_clips_never_repeat_last(self):
        cat = _catalog(2)
        rng = random.Random(42)
        queue = [1]
        for _ in range(50):
            clip = select_next(cat, queue, 0, rng)
            assert clip != queue[-1]
            queue.append(clip)

    def test_two_clips_may_repeat_current(self):
        """Pool of 2 only avoids the last queued clip; the playing one may come back.

        With queue [1, 2] and clip 1 playing, clip 1 is the only candidate.
        """
        cat = _catalog(2)
        assert select_next(cat, [1, 2], 0, random.Random(3)) == 1

    def test_three_clips_avoid_last_and_current(self):
        cat = _catalog(3)
        rng = random.Random(42)
        for _ in range(50):
            assert select_next(cat, [1, 2], 0, rng) == 3

    def test_last_equal_to_current(self):
        """When the playing clip is the last queued one, only it is excluded."""
        cat = _catalog(3)
        rng = random.Random(42)
        picks = {select_next(cat, [1, 2], 1, rng) for _ in range(100)}
        assert picks == {1, 3}

    def test_idle_cursor_excludes_only_last(self):
        cat = _catalog(3)
        rng = random.Random(42)
        picks = {select_next(cat, [2], -1, rng) for _ in range(100)}
        assert picks == {1, 3}

    def test_large_pool_property(self):
        """Never the previous clip, never the current clip, with >= 3 clips."""
        cat = _catalog(5)
        rng = random.Random(42)
        queue = [1]
        cursor = 0
        for _ in range(200):
            clip = select_next(cat, queue, cursor, rng)
            assert clip != queue[-1]
            assert clip != queue[cursor]
            queue.append(clip)
            cursor = min(cursor + rng.randint(0, 1), len(queue) - 1)
