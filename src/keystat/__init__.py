"""keystat - type-tag census of an embedded key-value store."""

from .core.config import KeyStatConfig
from .core.errors import (
    KeyStatError,
    StoreOpenError,
    KeyParseError,
    IterationError,
    SizeQueryError,
)
from .core.analyzer import Report, StoreAnalyzer
from .core.types import Key, Value, TypeTag, KeyRange, ReportRow, Ok, Err
from .components.classifier import classify, key_range, prefix
from .components.catalog import TYPE_NAMES
from .storage import MemoryStore, open_store

__all__ = [
    "KeyStatConfig",
    "KeyStatError",
    "StoreOpenError",
    "KeyParseError",
    "IterationError",
    "SizeQueryError",
    "Report",
    "StoreAnalyzer",
    "Key",
    "Value",
    "TypeTag",
    "KeyRange",
    "ReportRow",
    "Ok",
    "Err",
    "classify",
    "key_range",
    "prefix",
    "TYPE_NAMES",
    "MemoryStore",
    "open_store",
]
