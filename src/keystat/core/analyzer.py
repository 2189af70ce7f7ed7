"""Store analyzer - main public API.

Orchestrates the scan, size estimation and report for one store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import KeyStatConfig
from .types import ReportRow
from ..components.aggregator import FrequencyAggregator, ScanResult
from ..components.report import build_rows, render
from ..components.sizer import SizeEstimate, SizeEstimator
from ..interfaces.store import KeyValueStore
from ..storage import open_store

logger = logging.getLogger(__name__)


@dataclass
class Report:
    """Everything one run learned about a store."""

    scan: ScanResult
    estimate: SizeEstimate
    rows: list[ReportRow] = field(default_factory=list)

    def lines(self) -> list[str]:
        return render(self.scan.frequencies, self.rows, self.scan.malformed_keys)

    def raise_for_error(self) -> None:
        """Re-raise the iteration error that cut the scan short, if any."""
        if not self.scan.complete:
            raise self.scan.error


class StoreAnalyzer:
    """Type-tag census of a key-value store.

    Args:
        config: Scan configuration

    Public API:
        - analyze(store): Census of an already opened store
        - run(): Open config.store_path, analyze it, close it

    Invariants:
        - The store is only read, never written
        - Size queries start only after the scan has finished
        - A store opened by run() is closed on every exit path
    """

    def __init__(self, config: KeyStatConfig):
        self.config = config
        self._aggregator = FrequencyAggregator(config.progress_interval)
        self._estimator = SizeEstimator(config.namespace)

    def analyze(self, store: KeyValueStore) -> Report:
        """Scan store, size every observed tag and build the sorted rows."""
        scan = self._aggregator.scan(store)
        logger.info(
            f"Scanned {scan.total_keys} keys: {len(scan.frequencies)} types, "
            f"{scan.malformed_keys} malformed"
        )
        if not scan.complete:
            logger.warning(f"Scan incomplete, reporting partial counts: {scan.error}")

        estimate = self._estimator.estimate(store, scan.frequencies)
        rows = build_rows(scan.frequencies, estimate.sizes)
        return Report(scan=scan, estimate=estimate, rows=rows)

    def run(self) -> Report:
        """Open the configured store and analyze it.

        Raises StoreOpenError if the store does not exist.
        """
        with open_store(self.config.store_path) as store:
            return self.analyze(store)
