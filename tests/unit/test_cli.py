"""Unit tests for the command line entry point."""

from unittest.mock import patch

import pytest

from keystat.cli.main import USAGE_EXIT_CODE, main
from keystat.core.errors import IterationError
from keystat.storage.memory import MemoryStore


@pytest.mark.parametrize("argv", [[], ["a", "b"], ["a", "b", "c"], ["a", "--bogus"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    """Anything but one path prints usage to stdout and exits 3."""
    assert main(argv) == USAGE_EXIT_CODE == 3
    out = capsys.readouterr().out
    assert out.startswith("usage: keystat")


def test_help_exits_zero(capsys):
    """argparse help is still available."""
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "usage: keystat" in capsys.readouterr().out


def test_report_printed_to_stdout(capsys):
    """A successful run prints the report and exits 0."""
    store = MemoryStore([
        (b"kv:00:alice", b"x" * 100),
        (b"kv:00:bob", b"x" * 100),
        (b"kv:0f:sig1", b"x"),
        (b"kv:aa:xyz", b"x"),
    ])
    with patch("keystat.core.analyzer.open_store", return_value=store) as opener:
        assert main(["/some/store"]) == 0

    opener.assert_called_once_with("/some/store")
    assert capsys.readouterr().out.splitlines() == [
        "found 3 key types in db",
        "DBUser: count: 2, size: 220 B",
        "DBSig: count: 1, size: 11 B",
    ]
    with pytest.raises(IterationError):
        list(store.iterate())


class BrokenStore(MemoryStore):
    """Store that fails after yielding its first key."""

    def iterate(self):
        it = super().iterate()
        yield next(it)
        raise IterationError("checksum mismatch")


def test_iteration_error_prints_partial_report_then_raises(capsys):
    """A broken scan still reports what it saw, then fails the run."""
    store = BrokenStore([(b"kv:00:alice", b"x"), (b"kv:00:bob", b"x")])
    with patch("keystat.core.analyzer.open_store", return_value=store):
        with pytest.raises(IterationError):
            main(["/some/store"])

    out = capsys.readouterr().out
    assert out.startswith("found 1 key types in db\nDBUser: count: 1")
    # handle released even though the run failed
    with pytest.raises(IterationError):
        list(store.iterate())
