"""Cancelable delayed events advanced by frame time."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from combo_dance.types import Token


@dataclass
class Delay:
    """One-shot countdown. Fires when remaining reaches 0, then is dropped."""

    token: Token
    remaining_ms: float
    event: Any


class DelayScheduler:
    """Holds pending delays by token.

    Scheduling a token that is already pending replaces it. Cancelling an
    unknown or already fired token is a no-op.
    """

    def __init__(self) -> None:
        self._pending: dict[Token, Delay] = {}

    def schedule(self, token: Token, delay_ms: float, event: Any) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")
        self._pending.pop(token, None)
        self._pending[token] = Delay(token, delay_ms, event)

    def cancel(self, token: Token) -> bool:
        """Drop a pending delay. Returns True if one was pending."""
        return self._pending.pop(token, None) is not None

    def is_pending(self, token: Token) -> bool:
        return token in self._pending

    def pending(self) -> int:
        return len(self._pending)

    def remaining(self, token: Token) -> float | None:
        delay = self._pending.get(token)
        return delay.remaining_ms if delay is not None else None

    def advance(self, elapsed_ms: float) -> list[Any]:
        """Count every delay down and return the events that came due.

        Due events are ordered by how far past due they are (earliest first),
        then by scheduling order.
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must not be negative, got {elapsed_ms}")
        due: list[Delay] = []
        for delay in list(self._pending.values()):
            delay.remaining_ms -= elapsed_ms
            if delay.remaining_ms <= 0:
                del self._pending[delay.token]
                due.append(delay)
        due.sort(key=lambda d: d.remaining_ms)
        return [d.event for d in due]

    def clear(self) -> None:
        self._pending.clear()
