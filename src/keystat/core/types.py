"""Common type definitions for keystat.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

# Core primitive types
Key = bytes
Value = bytes
TypeTag = int
FrequencyRecord = dict[TypeTag, int]
SizeRecord = dict[TypeTag, int]

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the error that caused it."""
    error: E


Result = Ok[T] | Err[E]


@dataclass(frozen=True)
class KeyRange:
    """Half-open byte range ``[start, end)``."""
    start: Key
    end: Key


@dataclass(frozen=True)
class ReportRow:
    """One printed line of the report."""
    tag: TypeTag
    name: str
    count: int
    size: int
