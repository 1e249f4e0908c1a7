from __future__ import annotations

import logging

from core.presentation.observable import Observable


def test_set_notifies_listeners_in_subscription_order() -> None:
    seen: list[tuple[str, int]] = []
    obs: Observable[int] = Observable(0)
    obs.subscribe(lambda v: seen.append(("a", v)))
    obs.subscribe(lambda v: seen.append(("b", v)))

    obs.set(5)

    assert obs.value == 5
    assert seen == [("a", 5), ("b", 5)]


def test_unsubscribe_stops_notifications_and_is_idempotent() -> None:
    seen: list[int] = []
    obs: Observable[int] = Observable(0)
    unsubscribe = obs.subscribe(seen.append)

    obs.set(1)
    unsubscribe()
    unsubscribe()
    obs.set(2)

    assert seen == [1]


def test_failing_listener_does_not_block_others(caplog) -> None:
    seen: list[str] = []
    obs: Observable[str] = Observable("")

    def broken(value: str) -> None:
        raise RuntimeError("render failed")

    obs.subscribe(broken)
    obs.subscribe(seen.append)

    with caplog.at_level(logging.ERROR, logger="core.presentation.observable"):
        obs.set("x")

    assert seen == ["x"]
    assert obs.value == "x"
    assert "listener" in caplog.text


def test_listener_may_unsubscribe_during_notification() -> None:
    seen: list[str] = []
    obs: Observable[int] = Observable(0)

    def once(value: int) -> None:
        seen.append("once")
        unsubscribe()

    unsubscribe = obs.subscribe(once)
    obs.subscribe(lambda v: seen.append("always"))

    obs.set(1)
    obs.set(2)

    assert seen == ["once", "always", "always"]
