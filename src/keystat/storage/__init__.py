"""Store backends that satisfy the KeyValueStore protocol."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .memory import MemoryStore

if TYPE_CHECKING:
    from .leveldb import LevelDBStore


def open_store(path: str | Path) -> LevelDBStore:
    """Open the existing on-disk store at path read-only.

    Raises StoreOpenError if no store exists there.
    """
    # plyvel is only loaded for on-disk stores
    from .leveldb import LevelDBStore

    return LevelDBStore(path)


__all__ = ["MemoryStore", "open_store"]
