"""Protocols implemented by keystat store backends."""

from .store import KeyValueStore

__all__ = ["KeyValueStore"]
