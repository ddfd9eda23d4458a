"""Built-in clip catalog for the demo (no model file is loaded)."""
from combo_dance.config import DEFAULT_EXCLUDED_CLIP

# (name, duration_ms), in the order a model file would report them.
CLIPS: list[tuple[str, float]] = [
    ("Idle", 3000.0),
    ("Hip Hop", 2400.0),
    ("Samba", 2800.0),
    ("Robot", 2000.0),
    (DEFAULT_EXCLUDED_CLIP, 1000.0),
    ("Shuffle", 2200.0),
    ("End Move", 2600.0),
]

CLIP_NAMES = [name for name, _ in CLIPS]
CLIP_DURATIONS = [duration for _, duration in CLIPS]
