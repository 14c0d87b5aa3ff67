"""
In-memory log store.
"""

import logging
import threading
from typing import Iterable

from logingest.core.exceptions import StoreCorruptedError
from logingest.domain.entities import Log

__all__ = ["LogStore"]

logger = logging.getLogger(__name__)


class LogStore:
    """
    Thread-safe, append-only in-memory log storage.

    Logs from one ``extend`` call land contiguously and in order; they are
    never interleaved with logs from a concurrent call. There is no
    capacity limit and nothing is ever evicted.

    If an append fails inside the critical section the store is marked
    corrupted and every later call raises StoreCorruptedError.
    """

    def __init__(self):
        self._logs: list[Log] = []
        self._lock = threading.Lock()
        self._corrupted = False

    def extend(self, logs: Iterable[Log]) -> None:
        """
        Append a batch of logs atomically.

        Raises:
            StoreCorruptedError: If the store was corrupted by an earlier failure
        """
        batch = list(logs)
        with self._lock:
            self._check_usable()
            before = len(self._logs)
            try:
                self._logs.extend(batch)
            except BaseException:
                del self._logs[before:]
                self._corrupted = True
                logger.error("Append of %d logs failed; store marked corrupted", len(batch))
                raise

    def snapshot(self) -> list[Log]:
        """Return a copy of all stored logs in insertion order."""
        with self._lock:
            self._check_usable()
            return list(self._logs)

    @property
    def corrupted(self) -> bool:
        """Whether an earlier append left the store unusable."""
        return self._corrupted

    def __len__(self) -> int:
        with self._lock:
            self._check_usable()
            return len(self._logs)

    def _check_usable(self) -> None:
        """Must be called with self._lock held."""
        if self._corrupted:
            raise StoreCorruptedError("Log store is corrupted and cannot be used")
