"""Tests for catalog resolution."""
from combo_dance.catalog import AnimationCatalog, resolve_catalog
from combo_dance.config import DEFAULT_EXCLUDED_CLIP


class TestResolve:
    def test_finds_idle_and_end_move(self):
        cat = resolve_catalog(["Dance1", "Idle", "Dance2", "End Move", "Dance3"])
        assert cat.idle_index == 1
        assert cat.end_move_index == 3
        assert cat.eligible() == [0, 2, 4]

    def test_markers_case_insensitive_substring(self):
        cat = resolve_catalog(["Armature|IDLE_loop", "hip hop", "big END MOVE finale"])
        assert cat.idle_index == 0
        assert cat.end_move_index == 2

    def test_first_match_wins(self):
        cat = resolve_catalog(["a", "idle 1", "idle 2", "end move"])
        assert cat.idle_index == 1

    def test_fallbacks(self):
        """No idle -> index 0; no end move -> last clip."""
        cat = resolve_catalog(["Salsa", "Tango", "Waltz", "Polka"])
        assert cat.idle_index == 0
        assert cat.end_move_index == 3
        assert cat.eligible() == [1, 2]

    def test_excluded_names(self):
        names = ["Idle", "Dance1", DEFAULT_EXCLUDED_CLIP, "Dance2", "End Move"]
        cat = resolve_catalog(names, excluded_names=[DEFAULT_EXCLUDED_CLIP])
        assert cat.excluded == frozenset({2})
        assert cat.eligible() == [1, 3]

    def test_custom_markers(self):
        cat = resolve_catalog(["rest", "jig", "bow"], idle_marker="rest", end_move_marker="bow")
        assert (cat.idle_index, cat.end_move_index) == (0, 2)

    def test_empty_catalog(self):
        cat = resolve_catalog([])
        assert not cat.loaded
        assert cat.idle_index == 0
        assert cat.end_move_index == 0
        assert cat.eligible() == []

    def test_single_clip_has_no_pool(self):
        cat = resolve_catalog(["Idle"])
        assert cat.eligible() == []


class TestCatalog:
    def test_default_is_empty(self):
        cat = AnimationCatalog()
        assert len(cat) == 0
        assert not cat.loaded

    def test_is_eligible_bounds(self):
        cat = resolve_catalog(["Idle", "Dance", "End Move"])
        assert cat.is_eligible(1)
        assert not cat.is_eligible(0)
        assert not cat.is_eligible(2)
        assert not cat.is_eligible(3)
        assert not cat.is_eligible(-1)

    def test_name(self):
        cat = resolve_catalog(["Idle", "Dance"])
        assert cat.name(1) == "Dance"
