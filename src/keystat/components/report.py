"""Report rendering.

Joins frequencies and sizes into rows and formats them for humans.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TextIO

from ..core.types import FrequencyRecord, ReportRow, SizeRecord, TypeTag
from .catalog import TYPE_NAMES

_SI_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB"]


def format_bytes(n: int) -> str:
    """Render a byte count with SI units, e.g. ``82854982 -> "83 MB"``."""
    if n < 10:
        return f"{n} B"
    exp = 0
    while exp < len(_SI_UNITS) - 1 and n >= 1000 ** (exp + 1):
        exp += 1
    value = math.floor(n / 1000 ** exp * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {_SI_UNITS[exp]}"
    return f"{value:.0f} {_SI_UNITS[exp]}"


def build_rows(
    frequencies: FrequencyRecord,
    sizes: SizeRecord,
    names: Mapping[TypeTag, str] = TYPE_NAMES,
) -> list[ReportRow]:
    """Return named rows sorted by size, largest first.

    Tags without a name or without a size are left out.
    """
    rows = [
        ReportRow(tag=tag, name=names[tag], count=count, size=sizes[tag])
        for tag, count in frequencies.items()
        if tag in names and tag in sizes
    ]
    rows.sort(key=lambda r: r.size, reverse=True)
    return rows


def render(frequencies: FrequencyRecord, rows: list[ReportRow], malformed_keys: int = 0) -> list[str]:
    """Return the report as a list of lines."""
    lines = [f"found {len(frequencies)} key types in db"]
    for row in rows:
        lines.append(f"{row.name}: count: {row.count}, size: {format_bytes(row.size)}")
    if malformed_keys:
        lines.append(f"skipped {malformed_keys} malformed keys")
    return lines


def write_report(lines: list[str], out: TextIO | None = None) -> None:
    """Print report lines to out (stdout by default)."""
    for line in lines:
        print(line, file=out)
