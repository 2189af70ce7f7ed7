"""Exception hierarchy for keystat.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class KeyStatError(Exception):
    """Base exception for all keystat errors."""
    pass


class StoreOpenError(KeyStatError):
    """Raised when the store is missing or cannot be opened."""
    pass


class KeyParseError(KeyStatError):
    """Raised when a key does not follow the ``kv:<hex>:<rest>`` layout."""
    pass


class IterationError(KeyStatError):
    """Raised when the store signals an error in the middle of a scan."""
    pass


class SizeQueryError(KeyStatError):
    """Raised when the store cannot report the size of a key range."""
    pass
