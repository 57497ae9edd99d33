"""ConstantCache — compute-once, thread-safe memo keyed by a hashable key.

The first caller for a key computes the value outside the lock; concurrent
callers for the same key block until it is published and then share it.
At most one computation per key runs at a time. A failed computation is
re-raised to every waiter and the key is released so a later call retries.
Entries are never evicted.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar, final

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)


@final
class _Pending(Generic[V]):
    """A slot that is filled exactly once, with a value or an exception."""

    __slots__ = ("_done", "_error", "_value")

    def __init__(self) -> None:
        self._done = threading.Event()
        self._value: V | None = None
        self._error: BaseException | None = None

    def publish(self, value: V) -> None:
        self._value = value
        self._done.set()

    def fail(self, error: BaseException) -> None:
        self._error = error
        self._done.set()

    def wait(self) -> V:
        self._done.wait()
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]


@final
class ConstantCache(Generic[K, V]):
    """Memoized-future cache: at most one computation per distinct key."""

    def __init__(self, name: str = "constants") -> None:
        self._name = name
        self._lock = threading.Lock()
        self._entries: dict[K, _Pending[V]] = {}

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        with self._lock:
            pending = self._entries.get(key)
            owner = pending is None
            if pending is None:
                pending = _Pending()
                self._entries[key] = pending
        if not owner:
            return pending.wait()

        logger.debug("%s: computing %r", self._name, key)
        try:
            value = compute()
        except BaseException as exc:
            with self._lock:
                del self._entries[key]
            pending.fail(exc)
            raise
        pending.publish(value)
        return value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
