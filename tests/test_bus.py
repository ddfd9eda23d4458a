"""Tests for EffectBus."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from combo_dance.bus import EffectBus
from combo_dance.effects import StartMusic, StopMusic


@dataclass(frozen=True)
class Flash:
    color: str


class TestSubscribeAndFlush:
    def test_publish_does_not_dispatch_until_flush(self) -> None:
        bus = EffectBus()
        got: list[Any] = []
        bus.subscribe(Flash, got.append)

        bus.publish(Flash("red"))
        assert got == []

        bus.flush()
        assert got == [Flash("red")]

    def test_dispatch_by_type(self) -> None:
        bus = EffectBus()
        starts: list[Any] = []
        stops: list[Any] = []
        bus.subscribe(StartMusic, starts.append)
        bus.subscribe(StopMusic, stops.append)

        bus.publish(StartMusic())
        bus.publish(StopMusic())
        bus.publish(StartMusic())
        bus.flush()

        assert len(starts) == 2
        assert len(stops) == 1

    def test_publish_order_preserved_across_types(self) -> None:
        bus = EffectBus()
        order: list[str] = []
        bus.subscribe(Flash, lambda e: order.append(e.color))
        bus.subscribe(StopMusic, lambda e: order.append("stop"))

        bus.publish(Flash("a"))
        bus.publish(StopMusic())
        bus.publish(Flash("b"))
        bus.flush()

        assert order == ["a", "stop", "b"]

    def test_multiple_handlers_in_subscription_order(self) -> None:
        bus = EffectBus()
        order: list[int] = []
        bus.subscribe(Flash, lambda e: order.append(1))
        bus.subscribe(Flash, lambda e: order.append(2))
        bus.publish(Flash("x"))
        bus.flush()
        assert order == [1, 2]

    def test_no_subscribers_is_fine(self) -> None:
        bus = EffectBus()
        bus.publish(Flash("x"))
        bus.flush()

    def test_flush_empties_queue(self) -> None:
        bus = EffectBus()
        got: list[Any] = []
        bus.subscribe(Flash, got.append)
        bus.publish(Flash("x"))
        bus.flush()
        bus.flush()
        assert len(got) == 1


class TestPublishDuringFlush:
    def test_effects_published_by_handler_wait_for_next_flush(self) -> None:
        bus = EffectBus()
        got: list[Any] = []

        def relay(e: Flash) -> None:
            got.append(e)
            if e.color == "first":
                bus.publish(Flash("second"))

        bus.subscribe(Flash, relay)
        bus.publish(Flash("first"))
        bus.flush()
        assert got == [Flash("first")]

        bus.flush()
        assert got == [Flash("first"), Flash("second")]


class TestUnsubscribeAndClear:
    def test_unsubscribe(self) -> None:
        bus = EffectBus()
        got: list[Any] = []
        bus.subscribe(Flash, got.append)
        bus.unsubscribe(Flash, got.append)
        bus.publish(Flash("x"))
        bus.flush()
        assert got == []

    def test_unsubscribe_unknown_is_noop(self) -> None:
        bus = EffectBus()
        bus.unsubscribe(Flash, lambda e: None)
        bus.subscribe(Flash, lambda e: None)
        bus.unsubscribe(Flash, lambda e: None)

    def test_clear_drops_queued(self) -> None:
        bus = EffectBus()
        got: list[Any] = []
        bus.subscribe(Flash, got.append)
        bus.publish(Flash("x"))
        bus.clear()
        bus.flush()
        assert got == []
