"""Frequency aggregator.

Counts keys per type tag over one forward pass of a store.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.errors import IterationError
from ..core.types import Err, FrequencyRecord
from .classifier import classify, split_fields

if TYPE_CHECKING:
    from ..interfaces.store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_INTERVAL = 100_000


@dataclass
class ScanResult:
    """Outcome of a full scan.

    Attributes:
        frequencies: Occurrence count per observed type tag
        total_keys: Keys yielded by the store, malformed ones included
        malformed_keys: Keys that failed classification
        error: Iteration error that ended the scan early, if any
    """

    frequencies: FrequencyRecord = field(default_factory=dict)
    total_keys: int = 0
    malformed_keys: int = 0
    error: IterationError | None = None

    @property
    def complete(self) -> bool:
        return self.error is None


class FrequencyAggregator:
    """Scans a store and tallies keys by type tag.

    Args:
        progress_interval: Log a progress notice every this many keys

    Invariants:
        - Malformed keys are logged and skipped, never counted
        - sum(frequencies) == total_keys - malformed_keys
        - An iteration error stops the scan but keeps partial counts
    """

    def __init__(self, progress_interval: int = DEFAULT_PROGRESS_INTERVAL):
        if progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {progress_interval}")
        self.progress_interval = progress_interval

    def scan(self, store: KeyValueStore) -> ScanResult:
        """Iterate every key of store and count it under its type tag."""
        counts: Counter[int] = Counter()
        result = ScanResult()

        try:
            for key, _value in store.iterate():
                result.total_keys += 1

                parsed = classify(key)
                if isinstance(parsed, Err):
                    result.malformed_keys += 1
                    logger.warning(f"unable to parse key {key!r}, {split_fields(key)}, {parsed.error}")
                else:
                    counts[parsed.value] += 1

                if result.total_keys % self.progress_interval == 0:
                    logger.info(f"found {result.total_keys} keys so far")
        except IterationError as e:
            logger.error(f"Scan stopped after {result.total_keys} keys: {e}")
            result.error = e

        result.frequencies = dict(counts)
        return result
