"""Size estimator.

Asks the store how many bytes each observed type tag occupies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.errors import SizeQueryError
from ..core.types import Err, Key, Ok, Result, SizeRecord, TypeTag
from .catalog import name_of
from .classifier import DEFAULT_NAMESPACE, key_range

if TYPE_CHECKING:
    from ..interfaces.store import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class SizeEstimate:
    """Per-tag sizes plus the tags whose size query failed."""

    sizes: SizeRecord = field(default_factory=dict)
    failures: dict[TypeTag, SizeQueryError] = field(default_factory=dict)


class SizeEstimator:
    """Issues one range size query per type tag, sequentially.

    Args:
        namespace: First key field used to build range prefixes
    """

    def __init__(self, namespace: Key = DEFAULT_NAMESPACE):
        self.namespace = namespace

    def size_of_tag(self, store: KeyValueStore, tag: TypeTag) -> Result[int, SizeQueryError]:
        """Return the on-disk size of tag's key range, or the query failure."""
        rng = key_range(tag, self.namespace)
        try:
            size = store.size_of(rng.start, rng.end)
        except SizeQueryError as e:
            return Err(e)
        logger.debug(f"size of [{rng.start!r}, {rng.end!r}) = {size}")
        return Ok(size)

    def estimate(self, store: KeyValueStore, tags: Iterable[TypeTag]) -> SizeEstimate:
        """Query sizes for every tag; failures are logged and skipped."""
        estimate = SizeEstimate()
        for tag in tags:
            outcome = self.size_of_tag(store, tag)
            if isinstance(outcome, Err):
                logger.warning(f"unable to get size for: {name_of(tag) or f'0x{tag:02x}'} {outcome.error}")
                estimate.failures[tag] = outcome.error
                continue
            estimate.sizes[tag] = outcome.value
        return estimate
