"""Observable attribute for presentation state.

Pure Python listener list: `set` replaces the value and broadcasts it to
subscribers in subscription order. A failing listener is logged and skipped
so one broken view cannot stop the others from redrawing.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from core.log import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Observable(Generic[T]):
    """A value whose changes are broadcast to interested subscribers."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """Register `listener`; returns an idempotent unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def set(self, value: T) -> None:
        self._value = value
        # Snapshot: listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Observable listener %r failed", listener)

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
