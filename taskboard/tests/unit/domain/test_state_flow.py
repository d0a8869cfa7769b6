from __future__ import annotations

import logging
import threading
from typing import List

import pytest

from taskboard.domain.state_flow import StateFlow, combine, flat_map_latest, map_flow


def test_state_flow_emits_current_value_and_changes_only() -> None:
    flow = StateFlow(1)
    seen: List[int] = []

    flow.subscribe(seen.append)
    assert flow.set(1) is False
    assert flow.set(2) is True
    flow.update(lambda value: value + 1)

    assert seen == [1, 2, 3]
    assert flow.value == 3


def test_unsubscribe_stops_delivery() -> None:
    flow = StateFlow("a")
    seen: List[str] = []

    unsubscribe = flow.subscribe(seen.append, emit_current=False)
    flow.set("b")
    unsubscribe()
    unsubscribe()
    flow.set("c")

    assert seen == ["b"]
    assert flow.subscriber_count == 0


def test_failing_subscriber_is_logged_and_others_still_run(caplog) -> None:
    flow = StateFlow(0, name="counter")
    seen: List[int] = []

    def broken(_value: int) -> None:
        raise RuntimeError("boom")

    flow.subscribe(broken, emit_current=False)
    flow.subscribe(seen.append, emit_current=False)
    with caplog.at_level(logging.ERROR):
        flow.set(5)

    assert seen == [5]
    assert "Subscriber of counter failed" in caplog.text


def test_subscriber_setting_newer_value_skips_stale_delivery() -> None:
    flow = StateFlow(0)
    seen: List[int] = []

    def bump(value: int) -> None:
        if value == 1:
            flow.set(2)

    flow.subscribe(bump, emit_current=False)
    flow.subscribe(seen.append, emit_current=False)
    flow.set(1)

    assert seen == [2]
    assert flow.value == 2


def test_combine_recomputes_from_current_values() -> None:
    a = StateFlow(1)
    b = StateFlow(10)
    total = combine(a, b, transform=lambda x, y: x + y)
    seen: List[int] = []
    total.subscribe(seen.append)

    a.set(2)
    b.set(20)

    assert seen == [11, 12, 22]
    assert total.value == 22


def test_combine_requires_sources() -> None:
    with pytest.raises(ValueError):
        combine(transform=lambda: 0)


def test_derived_flow_is_read_only() -> None:
    derived = map_flow(StateFlow(1), lambda v: v * 2)

    with pytest.raises(TypeError):
        derived.set(5)
    with pytest.raises(TypeError):
        derived.update(lambda v: v)


def test_map_flow_on_error_supplies_fallback() -> None:
    source = StateFlow(2)
    errors: List[str] = []

    def invert(value: int) -> float:
        return 1 / value

    def fallback(exc: Exception) -> float:
        errors.append(type(exc).__name__)
        return -1.0

    derived = map_flow(source, invert, on_error=fallback)
    source.set(0)

    assert derived.value == -1.0
    assert errors == ["ZeroDivisionError"]

    source.set(4)
    assert derived.value == 0.25


def test_close_stops_following_source() -> None:
    source = StateFlow(1)
    derived = map_flow(source, lambda v: v + 1)

    derived.close()
    source.set(5)

    assert derived.value == 2
    assert source.subscriber_count == 0


def test_flat_map_latest_switches_to_newest_inner_flow() -> None:
    key = StateFlow("x")
    inners = {"x": StateFlow(1), "y": StateFlow(100)}
    result = flat_map_latest(key, lambda k: inners[k])
    seen: List[int] = []
    result.subscribe(seen.append)

    inners["x"].set(2)
    key.set("y")
    inners["x"].set(3)
    inners["y"].set(101)

    assert seen == [1, 2, 100, 101]
    assert inners["x"].subscriber_count == 0


def test_flat_map_latest_closes_previous_derived_inner() -> None:
    base = StateFlow(1)
    key = StateFlow(1)
    result = flat_map_latest(key, lambda factor: map_flow(base, lambda v: v * factor))

    assert result.value == 1
    key.set(10)
    base.set(2)

    assert result.value == 20
    assert base.subscriber_count == 1

    result.close()
    assert base.subscriber_count == 0
    assert key.subscriber_count == 0


def test_flat_map_latest_error_uses_fallback() -> None:
    key = StateFlow("ok")

    def resolve(k: str) -> StateFlow[int]:
        if k == "bad":
            raise LookupError(k)
        return StateFlow(7)

    result = flat_map_latest(key, resolve, on_error=lambda exc: 0)
    key.set("bad")

    assert result.value == 0
    key.set("ok")
    assert result.value == 7


def test_update_notifies_after_releasing_the_lock() -> None:
    flow = StateFlow(0)
    acquired: List[bool] = []

    def try_lock_from_other_thread(_value: int) -> None:
        def worker() -> None:
            got = flow._lock.acquire(blocking=False)
            if got:
                flow._lock.release()
            acquired.append(got)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    flow.subscribe(try_lock_from_other_thread, emit_current=False)
    flow.update(lambda value: value + 1)
    flow.set(5)

    assert acquired == [True, True]


def test_update_with_unchanged_value_does_not_notify() -> None:
    flow = StateFlow([1])
    seen: List[list] = []
    flow.subscribe(seen.append, emit_current=False)

    assert flow.update(lambda value: list(value)) is False
    assert seen == []
