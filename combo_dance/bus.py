"""Effect bus: typed pub/sub with explicit flush."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[Any], None]


class EffectBus:
    """Routes effects to subscribers by effect type.

    ``publish`` only queues; handlers run on ``flush``, in publish order, so
    effects of one reducer step are carried out after the step completes.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[Any], list[_Handler]] = {}
        self._queue: list[Any] = []

    def subscribe(self, effect_type: type[Any], handler: _Handler) -> None:
        self._subscribers.setdefault(effect_type, []).append(handler)

    def unsubscribe(self, effect_type: type[Any], handler: _Handler) -> None:
        handlers = self._subscribers.get(effect_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, effect: Any) -> None:
        self._queue.append(effect)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for effect in snapshot:
            for handler in list(self._subscribers.get(type(effect), [])):
                handler(effect)

    def clear(self) -> None:
        self._queue.clear()
