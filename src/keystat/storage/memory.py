"""In-memory ordered store implementation.

Uses sortedcontainers.SortedDict for efficient sorted operations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

from ..core.errors import IterationError, SizeQueryError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..core.types import Key, Value

logger = logging.getLogger(__name__)


class MemoryStore:
    """Sorted in-memory store exposing the read-only store protocol.

    Args:
        items: Initial (key, value) pairs; later duplicates overwrite earlier ones

    Invariants:
        - Keys are always maintained in sorted byte order
        - size_of() is the exact sum of len(key) + len(value) in the range
        - Reads after close() raise instead of returning stale data
    """

    def __init__(self, items: Iterable[tuple[Key, Value]] = ()):
        self._data: SortedDict = SortedDict()
        self._closed = False
        for key, value in items:
            self.put(key, value)

    def put(self, key: Key, value: Value) -> None:
        """Insert or update key; used to build fixtures before a scan."""
        self._data[key] = value

    def iterate(self) -> Iterator[tuple[Key, Value]]:
        """Yield every (key, value) pair in sorted key order."""
        if self._closed:
            raise IterationError("store is closed")
        for key, value in self._data.items():
            yield (key, value)

    def size_of(self, start: Key, end: Key) -> int:
        """Return total bytes of keys and values in ``[start, end)``."""
        if self._closed:
            raise SizeQueryError("store is closed")
        total = 0
        for key in self._data.irange(start, end, inclusive=(True, False)):
            total += len(key) + len(self._data[key])
        return total

    def __len__(self) -> int:
        return len(self._data)

    def close(self) -> None:
        """Mark the store closed."""
        if not self._closed:
            logger.debug(f"Closing in-memory store ({len(self)} keys)")
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
