"""Protocol definition for the inspected key-value store."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, Self

from ..core.types import Key, Value


class KeyValueStore(Protocol):
    """Read-only view of an ordered key-value store."""

    def iterate(self) -> Iterator[tuple[Key, Value]]:
        """Yield every (key, value) pair in forward key order.

        Raises IterationError if the store fails mid-scan.
        """
        ...

    def size_of(self, start: Key, end: Key) -> int:
        """Return the byte size of keys and values in ``[start, end)``.

        Raises SizeQueryError if the store cannot answer.
        """
        ...

    def close(self) -> None:
        """Release the handle; safe to call more than once."""
        ...

    def __enter__(self) -> Self:
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        ...
