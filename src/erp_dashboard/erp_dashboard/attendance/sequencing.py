from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LatestRequestGate(Generic[T]):
    """Latest request wins.

    Every report request takes a ticket from :meth:`issue`; a finished request
    may only publish its result while its ticket is still the newest one.
    Late responses from superseded requests are dropped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued = 0
        self._published: Optional[T] = None

    def issue(self) -> int:
        with self._lock:
            self._issued += 1
            return self._issued

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._issued

    def publish(self, ticket: int, result: T) -> bool:
        with self._lock:
            if ticket != self._issued:
                return False
            self._published = result
            return True

    @property
    def latest(self) -> Optional[T]:
        with self._lock:
            return self._published
