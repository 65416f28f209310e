"""Observable single-value cell.

Holds the current value and notifies subscribers of every write. New
subscribers receive the current value immediately, so late observers always
see the latest state. Async consumers get a conflated stream: if several writes
happen between two reads they only see the most recent one.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import AsyncIterator, Callable, Generic, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class StateCell(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._lock = threading.RLock()
        self._listeners: list[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value and notify every subscriber in subscription order."""

        with self._lock:
            self._value = value
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(value)
            except Exception:
                # Los demás observadores reciben el estado aunque uno falle.
                _LOGGER.exception("State listener %r failed", listener)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register `listener`, call it with the current value, return an unsubscribe callable."""

        with self._lock:
            self._listeners.append(listener)
            current = self._value

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        try:
            listener(current)
        except Exception:
            unsubscribe()
            raise
        return unsubscribe

    async def stream(self) -> AsyncIterator[T]:
        """Yield the current value, then the latest value after each change.

        Must be consumed on the event loop thread that performs the writes.
        """

        changed = asyncio.Event()
        unsubscribe = self.subscribe(lambda _value: changed.set())
        try:
            while True:
                await changed.wait()
                changed.clear()
                yield self._value
        finally:
            unsubscribe()
