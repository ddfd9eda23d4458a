"""Combo generation and key validation.

A combo is matched left to right. A wrong key marks the step at the cursor
as WRONG and blocks the combo until it is replaced; a combo whose cursor
reached the end is completed and likewise ignores input until replaced.
"""
from __future__ import annotations

import random
from typing import NamedTuple

from combo_dance.types import Combo, ComboStep, Direction, KeyOutcome, StepStatus

DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class KeyResult(NamedTuple):
    combo: Combo
    cursor: int
    outcome: KeyOutcome


def generate(n: int, rng: random.Random) -> Combo:
    """Return *n* PENDING steps with uniformly random directions."""
    if n < 0:
        raise ValueError(f"combo length must be >= 0, got {n}")
    return tuple(ComboStep(rng.choice(DIRECTIONS)) for _ in range(n))


def is_completed(combo: Combo, cursor: int) -> bool:
    return cursor == len(combo) and all(
        step.status is StepStatus.CORRECT for step in combo
    )


def is_failing(combo: Combo, cursor: int) -> bool:
    return cursor < len(combo) and combo[cursor].status is StepStatus.WRONG


def apply_key(combo: Combo, cursor: int, direction: Direction | None) -> KeyResult:
    """Apply one key press at *cursor*.

    ``direction`` is None for unrecognized keys. The input combo is never
    mutated; a new tuple is returned whenever a step changes status.
    """
    if not 0 <= cursor <= len(combo):
        raise ValueError(f"cursor {cursor} out of range for combo of {len(combo)}")

    if direction is None or cursor == len(combo) or is_failing(combo, cursor):
        return KeyResult(combo, cursor, KeyOutcome.IGNORED)

    step = combo[cursor]
    if direction is step.direction:
        marked = _mark(combo, cursor, StepStatus.CORRECT)
        new_cursor = cursor + 1
        if is_completed(marked, new_cursor):
            return KeyResult(marked, new_cursor, KeyOutcome.COMPLETED)
        return KeyResult(marked, new_cursor, KeyOutcome.ADVANCED)

    return KeyResult(_mark(combo, cursor, StepStatus.WRONG), cursor, KeyOutcome.FAILED)


def _mark(combo: Combo, index: int, status: StepStatus) -> Combo:
    step = combo[index]
    return combo[:index] + (ComboStep(step.direction, status),) + combo[index + 1 :]
