"""Configuration for keystat.

Defines all tunable parameters for a scan.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class KeyStatConfig:
    """Configuration parameters for a store scan.

    Attributes:
        store_path: Directory holding the store to inspect
        progress_interval: Emit a progress notice every this many keys
        namespace: First field of the range prefixes used for size queries
        log_level: Level name for the diagnostic stream
    """

    store_path: str
    progress_interval: int = 100_000
    namespace: bytes = b"kv"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")
        if not self.namespace:
            raise ValueError("namespace must not be empty")
