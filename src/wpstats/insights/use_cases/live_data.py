"""Single-slot observable holder for published results.

LiveResult keeps only the latest value. Subscribers registered before a
publish receive the new value; subscribers registered afterwards receive the
latest value immediately (replay-one). Nothing older is queued.
"""

import asyncio
import logging
import threading
from collections.abc import AsyncIterator, Callable
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LiveResult(Generic[T]):
    """Last-value-wins holder with callback and async-iterator observers.

    Usage:
        live = LiveResult()
        unsubscribe = live.subscribe(print)
        live.publish(result)       # print(result)

        async for result in live.observe():
            render(result)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._version = 0
        self._callbacks: list[Callable[[T], None]] = []
        self._wakeups: set[asyncio.Event] = set()

    @property
    def value(self) -> Optional[T]:
        """The latest published value, or None if nothing is held."""
        with self._lock:
            return self._value

    def publish(self, value: T) -> None:
        """Replace the held value and notify every current observer.

        A callback that raises is logged and skipped; the remaining observers
        are still notified.
        """
        with self._lock:
            self._value = value
            self._version += 1
            callbacks = list(self._callbacks)
            wakeups = list(self._wakeups)

        for event in wakeups:
            event.set()
        for callback in callbacks:
            try:
                callback(value)
            except Exception:
                logger.exception(f"Subscriber {callback!r} failed on publish")

    def clear(self) -> None:
        """Drop the held value. Observers are not notified."""
        with self._lock:
            self._value = None
            self._version += 1

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback, replaying the current value if there is one.

        Returns:
            A function that removes the callback
        """
        with self._lock:
            self._callbacks.append(callback)
            current = self._value

        if current is not None:
            callback(current)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)

        return unsubscribe

    async def observe(self) -> AsyncIterator[T]:
        """Yield the current value, then each newer one.

        A slow consumer skips intermediate values and only sees the latest.
        """
        event = asyncio.Event()
        with self._lock:
            self._wakeups.add(event)
        seen = -1

        try:
            while True:
                with self._lock:
                    version, value = self._version, self._value
                if value is not None and version != seen:
                    seen = version
                    yield value
                    continue

                event.clear()
                # publish() may have run between the read above and clear()
                with self._lock:
                    if self._value is not None and self._version != seen:
                        continue
                await event.wait()
        finally:
            with self._lock:
                self._wakeups.discard(event)
