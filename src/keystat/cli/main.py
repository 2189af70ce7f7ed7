# Command line entry point: census of type tags in an existing store.
from __future__ import annotations

import argparse
import logging
import sys

from keystat.core.analyzer import StoreAnalyzer
from keystat.core.config import KeyStatConfig
from keystat.components.report import write_report

USAGE_EXIT_CODE = 3


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="keystat",
        usage="%(prog)s <path/to/db.leveldb>",
        description="Count keys and on-disk size per record type in a LevelDB store",
    )
    p.add_argument("store", nargs="*", help="Directory of an existing LevelDB store")
    return p


def setup_logging(level: str) -> None:
    """Send diagnostics to stderr so the report on stdout stays clean."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    paths = args.store + extra
    if len(paths) != 1:
        print(parser.format_usage(), end="")
        return USAGE_EXIT_CODE

    config = KeyStatConfig(store_path=paths[0])
    setup_logging(config.log_level)

    report = StoreAnalyzer(config).run()
    write_report(report.lines())

    # Partial results are printed, but a broken scan still fails the run
    report.raise_for_error()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
