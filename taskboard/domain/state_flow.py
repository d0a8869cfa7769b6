"""Observable value holders used to derive UI state.

``StateFlow`` always has a current value and notifies subscribers when the
value changes. Derived flows (``combine``, ``map_flow``, ``flat_map_latest``)
recompute from the current values of their sources, so a derived value never
mixes an old and a new source value.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Subscriber = Callable[[Any], None]
Unsubscribe = Callable[[], None]

_log = logging.getLogger(__name__)


class StateFlow(Generic[T]):
    """Mutable holder of a single value with change notifications."""

    def __init__(self, initial: T, *, name: Optional[str] = None) -> None:
        self._value = initial
        self._name = name or type(self).__name__
        self._subscribers: List[Subscriber] = []
        self._version = 0
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"<{self._name} value={self._value!r}>"

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Store ``value``; notify subscribers when it differs from the current one.

        Returns:
            ``True`` when subscribers were notified.
        """
        with self._lock:
            version = self._store(value)
        if version is None:
            return False
        self._emit(value, version)
        return True

    def update(self, fn: Callable[[T], T]) -> bool:
        """Replace the value with ``fn(current)``; subscribers run after the lock is released."""
        with self._lock:
            value = fn(self._value)
            version = self._store(value)
        if version is None:
            return False
        self._emit(value, version)
        return True

    def _store(self, value: T) -> Optional[int]:
        # Caller holds the lock; returns the new version or None when unchanged.
        if value == self._value:
            return None
        self._value = value
        self._version += 1
        return self._version

    def subscribe(self, callback: Callable[[T], None], *, emit_current: bool = True) -> Unsubscribe:
        """Register ``callback`` and return a function that removes it."""
        with self._lock:
            self._subscribers.append(callback)
        if emit_current:
            callback(self._value)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _emit(self, value: T, version: int) -> None:
        for callback in list(self._subscribers):
            # A subscriber may have set a newer value; that emission already ran.
            if version != self._version:
                return
            try:
                callback(value)
            except Exception:
                _log.exception("Subscriber of %s failed", self._name)


class DerivedFlow(StateFlow[T]):
    """Read-only flow whose value is recomputed from source flows."""

    def __init__(self, initial: T, *, name: Optional[str] = None) -> None:
        super().__init__(initial, name=name)
        self._source_unsubscribes: List[Unsubscribe] = []

    def set(self, value: T) -> bool:
        raise TypeError(f"{self._name} is derived and cannot be set directly.")

    def update(self, fn: Callable[[T], T]) -> bool:
        raise TypeError(f"{self._name} is derived and cannot be updated directly.")

    def _publish(self, value: T) -> bool:
        return StateFlow.set(self, value)

    def _watch(self, source: StateFlow[Any], callback: Callable[[Any], None]) -> None:
        self._source_unsubscribes.append(source.subscribe(callback, emit_current=False))

    def close(self) -> None:
        """Stop following the sources; the last value stays readable."""
        while self._source_unsubscribes:
            self._source_unsubscribes.pop()()


def combine(
    *flows: StateFlow[Any],
    transform: Callable[..., T],
    on_error: Optional[Callable[[Exception], T]] = None,
    name: Optional[str] = None,
) -> DerivedFlow[T]:
    """Derive a flow from the current values of ``flows``.

    When ``transform`` raises and ``on_error`` is given, its return value is
    published instead. Without ``on_error`` an error at construction
    propagates, and an error during a later recompute is logged by the
    source flow and the previous value is kept.
    """
    if not flows:
        raise ValueError("combine() needs at least one source flow.")

    def compute() -> T:
        try:
            return transform(*(flow.value for flow in flows))
        except Exception as exc:
            if on_error is None:
                raise
            return on_error(exc)

    derived: DerivedFlow[T] = DerivedFlow(compute(), name=name or "combine")

    def recompute(_changed: Any) -> None:
        derived._publish(compute())

    for flow in flows:
        derived._watch(flow, recompute)
    return derived


def map_flow(
    flow: StateFlow[T],
    fn: Callable[[T], U],
    *,
    on_error: Optional[Callable[[Exception], U]] = None,
    name: Optional[str] = None,
) -> DerivedFlow[U]:
    return combine(flow, transform=fn, on_error=on_error, name=name or "map")


class _SwitchingFlow(DerivedFlow[U]):
    """Derived flow that follows the inner flow built for the latest key."""

    def __init__(
        self,
        source: StateFlow[T],
        fn: Callable[[T], StateFlow[U]],
        on_error: Optional[Callable[[Exception], U]],
        name: Optional[str],
    ) -> None:
        self._fn = fn
        self._on_error = on_error
        self._inner: Optional[StateFlow[U]] = None
        self._inner_unsubscribe: Optional[Unsubscribe] = None
        inner, fallback = self._resolve(source.value)
        super().__init__(inner.value if inner is not None else fallback, name=name or "flat_map_latest")
        self._attach(inner)
        self._watch(source, self._on_key)

    def _resolve(self, key: T) -> Tuple[Optional[StateFlow[U]], Any]:
        try:
            return self._fn(key), None
        except Exception as exc:
            if self._on_error is None:
                raise
            return None, self._on_error(exc)

    def _on_key(self, key: T) -> None:
        inner, fallback = self._resolve(key)
        self._attach(inner)
        if inner is None:
            self._publish(fallback)

    def _attach(self, inner: Optional[StateFlow[U]]) -> None:
        self._detach()
        if inner is None:
            return
        self._inner = inner
        self._inner_unsubscribe = inner.subscribe(self._publish, emit_current=False)
        self._publish(inner.value)

    def _detach(self) -> None:
        if self._inner_unsubscribe is not None:
            self._inner_unsubscribe()
            self._inner_unsubscribe = None
        if isinstance(self._inner, DerivedFlow):
            self._inner.close()
        self._inner = None

    def close(self) -> None:
        super().close()
        self._detach()


def flat_map_latest(
    source: StateFlow[T],
    fn: Callable[[T], StateFlow[U]],
    *,
    on_error: Optional[Callable[[Exception], U]] = None,
    name: Optional[str] = None,
) -> DerivedFlow[U]:
    """Follow the flow produced by ``fn`` for the latest source value.

    Switching the source drops the subscription to the previous inner flow
    and closes it when it is derived. Errors raised by ``fn`` are passed to
    ``on_error`` whose return value becomes the derived value; without
    ``on_error`` they propagate.
    """
    return _SwitchingFlow(source, fn, on_error, name)


__all__ = [
    "DerivedFlow",
    "StateFlow",
    "Unsubscribe",
    "combine",
    "flat_map_latest",
    "map_flow",
]
