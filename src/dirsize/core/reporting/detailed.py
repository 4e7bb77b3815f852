from __future__ import annotations

"""
Detailed Comma-Separated Report.

Header line plus one record per visited entry, regardless of type. The
output can be saved as a .csv file and opened in a spreadsheet.
"""

from typing import Iterable, List

from dirsize.core.reporting.formatting import kind_label
from dirsize.domain.constants import DETAILED_HEADER, DETAILED_SEPARATOR
from dirsize.domain.records import FileRecord


def detailed_header() -> str:
    return DETAILED_SEPARATOR.join(DETAILED_HEADER)


def detailed_row(record: FileRecord) -> str:
    fields = [
        record.path,
        str(record.apparent_size),
        str(record.allocated_blocks),
        kind_label(record.kind),
        str(record.descendant_count),
        str(record.access_time),
        str(record.modify_time),
        str(record.status_change_time),
    ]
    return DETAILED_SEPARATOR.join(fields)


def render_detailed(records: Iterable[FileRecord], lines: List[str]) -> None:
    """
    Render the header and every record into the accumulator.

    Args:
        records: Records to render, already sorted if requested.
        lines: The accumulator list for output lines (no newlines).
    """
    lines.append(detailed_header())
    for record in records:
        lines.append(detailed_row(record))
