from __future__ import annotations

"""
Report Formatting Primitives.

Unit conversion for the compact size column and the type labels of the
detailed report.
"""

from dirsize.domain.constants import (
    BLOCK_SIZE,
    HUMAN_FALLBACK_UNIT,
    HUMAN_UNITS,
    KB,
    KIND_LABELS,
)
from dirsize.domain.records import FileKind, FileRecord


def allocated_bytes(record: FileRecord) -> int:
    return record.allocated_blocks * BLOCK_SIZE


def format_human_size(size_bytes: int) -> str:
    """
    Render a byte count with a single-letter binary unit.

    The unit is the first of G, M whose size the value strictly exceeds,
    otherwise K. Values below 10 keep one decimal.

    Args:
        size_bytes: Number of bytes.

    Returns:
        str: e.g. "4.0K", "10M", "1024K".
    """
    divisor, suffix = HUMAN_FALLBACK_UNIT
    for unit_size, unit_suffix in HUMAN_UNITS:
        if size_bytes > unit_size:
            divisor, suffix = unit_size, unit_suffix
            break

    value = size_bytes / divisor
    if value < 10:
        return f"{value:.1f}{suffix}"
    return f"{value:.0f}{suffix}"


def format_size_column(
        record: FileRecord,
        human_readable: bool = False,
        apparent_bytes: bool = False,
) -> str:
    """
    Size column of the compact report, without the trailing tab.

    Human-readable wins over apparent bytes; the default is allocated
    space in whole KiB.
    """
    if human_readable:
        return format_human_size(allocated_bytes(record))
    if apparent_bytes:
        return str(record.apparent_size)
    return str(allocated_bytes(record) // KB)


def kind_label(kind: FileKind) -> str:
    """Detailed-report label, empty for unrecognized entries."""
    return KIND_LABELS.get(kind, "")
