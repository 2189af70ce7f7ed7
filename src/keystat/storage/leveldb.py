"""LevelDB store adapter.

Opens an existing LevelDB directory through plyvel for read-only scans.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import plyvel

from ..core.errors import IterationError, SizeQueryError, StoreOpenError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Key, Value

logger = logging.getLogger(__name__)


def _reason(e: Exception) -> str:
    """Return the text of a plyvel error, which carries bytes messages."""
    if e.args and isinstance(e.args[0], bytes):
        return e.args[0].decode("utf-8", errors="replace")
    return str(e)


class LevelDBStore:
    """Handle on an on-disk LevelDB database.

    Args:
        path: Directory of an existing LevelDB database

    Invariants:
        - The database is never created; a missing store fails at open
        - No method writes to the database
        - close() is idempotent
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        try:
            self._db = plyvel.DB(str(self.path), create_if_missing=False)
        except plyvel.Error as e:
            raise StoreOpenError(f"Cannot open store at {self.path}: {_reason(e)}") from e
        logger.info(f"Opened LevelDB store at {self.path}")

    def iterate(self) -> Iterator[tuple[Key, Value]]:
        """Yield every (key, value) pair in forward key order."""
        try:
            with self._db.iterator() as it:
                for key, value in it:
                    yield (key, value)
        except (plyvel.Error, RuntimeError) as e:
            raise IterationError(f"Iteration over {self.path} failed: {_reason(e)}") from e

    def size_of(self, start: Key, end: Key) -> int:
        """Return LevelDB's approximate on-disk size for ``[start, end)``."""
        try:
            return self._db.approximate_size(start, end)
        except (plyvel.Error, RuntimeError) as e:
            raise SizeQueryError(f"Size query [{start!r}, {end!r}) failed: {_reason(e)}") from e

    def close(self) -> None:
        """Close the database handle."""
        if self._db.closed:
            return
        logger.info(f"Closing LevelDB store at {self.path}")
        self._db.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
