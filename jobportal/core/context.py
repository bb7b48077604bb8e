"""
Request context - who is calling, and when.

An IdentityContext is opened once per request and passed explicitly into
every manager operation. The timestamp is read once at open time, so all
writes made by one request carry the same value.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional


class MonotonicClock:
    """Nanosecond wall clock that never goes backwards."""

    def __init__(self, source: Callable[[], int] = time.time_ns):
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            self._last = max(self._last, self._source())
            return self._last


_default_clock = MonotonicClock()


@dataclass(frozen=True)
class IdentityContext:
    identity: str
    timestamp: int

    @classmethod
    def open(cls, identity: str, clock: Optional[MonotonicClock] = None) -> "IdentityContext":
        return cls(identity=identity, timestamp=(clock or _default_clock).now())

    def current_identity(self) -> str:
        return self.identity

    def now(self) -> int:
        return self.timestamp
