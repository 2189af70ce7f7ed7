"""keystat core package."""

from .analyzer import Report, StoreAnalyzer

__all__ = ["StoreAnalyzer", "Report"]
