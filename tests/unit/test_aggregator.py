"""Unit tests for the frequency aggregator."""

import logging

import pytest

from keystat.components.aggregator import FrequencyAggregator
from keystat.core.errors import IterationError
from keystat.storage.memory import MemoryStore


class FailingStore(MemoryStore):
    """Store whose iteration breaks after a fixed number of keys."""

    def __init__(self, items, fail_after):
        super().__init__(items)
        self.fail_after = fail_after

    def iterate(self):
        for i, pair in enumerate(super().iterate()):
            if i == self.fail_after:
                raise IterationError("corrupted block")
            yield pair


@pytest.fixture
def store():
    """Store holding the canonical mixed key set."""
    return MemoryStore([
        (b"kv:00:alice", b"1"),
        (b"kv:00:bob", b"2"),
        (b"kv:0f:sig1", b"3"),
        (b"badkey", b"4"),
    ])


def test_scan_counts_per_tag(store):
    """Well-formed keys are counted under their tag."""
    result = FrequencyAggregator().scan(store)
    assert result.frequencies == {0x00: 2, 0x0F: 1}
    assert result.total_keys == 4
    assert result.malformed_keys == 1
    assert result.complete


def test_scan_logs_malformed_key(store, caplog):
    """Malformed keys produce one warning each and do not stop the scan."""
    with caplog.at_level(logging.WARNING, logger="keystat"):
        FrequencyAggregator().scan(store)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "badkey" in warnings[0].getMessage()
    assert "too few fields" in warnings[0].getMessage()


def test_scan_sum_matches_well_formed_keys():
    """Counts add up to total keys minus malformed keys."""
    items = [(b"kv:%02x:%d" % (i % 7, i), b"") for i in range(100)]
    items += [(b"junk%d" % i, b"") for i in range(13)]
    items += [(b"kv:XY:%d" % i, b"") for i in range(5)]
    result = FrequencyAggregator().scan(MemoryStore(items))

    assert result.total_keys == 118
    assert result.malformed_keys == 18
    assert sum(result.frequencies.values()) == result.total_keys - result.malformed_keys


def test_scan_is_idempotent(store):
    """Two scans of an unchanged store agree."""
    aggregator = FrequencyAggregator()
    assert aggregator.scan(store).frequencies == aggregator.scan(store).frequencies


def test_scan_empty_store():
    """An empty store yields no types."""
    result = FrequencyAggregator().scan(MemoryStore())
    assert result.frequencies == {}
    assert result.total_keys == 0


def test_scan_progress_notices(caplog):
    """A progress notice is logged every progress_interval keys."""
    items = [(b"kv:01:%03d" % i, b"") for i in range(25)]
    with caplog.at_level(logging.INFO, logger="keystat"):
        FrequencyAggregator(progress_interval=10).scan(MemoryStore(items))

    progress = [r.getMessage() for r in caplog.records if "keys so far" in r.getMessage()]
    assert progress == ["found 10 keys so far", "found 20 keys so far"]


def test_scan_keeps_partial_counts_on_iteration_error():
    """An iteration error ends the scan but partial counts survive."""
    items = [(b"kv:00:%d" % i, b"") for i in range(5)]
    result = FrequencyAggregator().scan(FailingStore(items, fail_after=3))

    assert result.frequencies == {0x00: 3}
    assert result.total_keys == 3
    assert isinstance(result.error, IterationError)
    assert not result.complete


def test_invalid_progress_interval():
    """Progress interval must be positive."""
    with pytest.raises(ValueError):
        FrequencyAggregator(progress_interval=0)
