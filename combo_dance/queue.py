"""EventQueue - FIFO serialization of game inputs."""
from __future__ import annotations

from collections import deque
from typing import Any, Callable


class EventQueue:
    """Collects events from every input source and hands them out one at a time.

    Key presses, frame ticks, finish notifications and fired delays all go
    through the same queue, so no two of them are ever processed at once.
    Events enqueued while a drain is running are processed by that same drain.
    """

    def __init__(self) -> None:
        self._pending: deque[Any] = deque()
        self._draining = False

    @property
    def draining(self) -> bool:
        return self._draining

    def enqueue(self, event: Any) -> None:
        """Add an event to the back of the queue. Safe to call from a handler."""
        self._pending.append(event)

    def pending(self) -> int:
        """Return the number of events waiting to be processed."""
        return len(self._pending)

    def drain(self, handler: Callable[[Any], bool]) -> list[tuple[Any, bool]]:
        """Process pending events in order.  Returns ``[(event, accepted), ...]``.

        A nested call made from inside ``handler`` returns an empty list and
        leaves its events for the outer drain.
        """
        if self._draining:
            return []
        results: list[tuple[Any, bool]] = []
        self._draining = True
        try:
            while self._pending:
                event = self._pending.popleft()
                results.append((event, handler(event)))
        finally:
            self._draining = False
        return results

    def clear(self) -> None:
        self._pending.clear()
