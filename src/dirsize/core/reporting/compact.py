from __future__ import annotations

"""
Compact Columnar Report.

One tab-separated line per visible record: size, optional descendant
count, then the path.
"""

from typing import Iterable, List

from dirsize.core.reporting.formatting import format_size_column
from dirsize.domain.records import FileRecord


# -----------------------------------------------------------------------------
# Compact Rendering Logic
# -----------------------------------------------------------------------------
def render_compact(
        records: Iterable[FileRecord],
        lines: List[str],
        human_readable: bool = False,
        apparent_bytes: bool = False,
        show_counts: bool = False,
        include_files: bool = False,
) -> None:
    """
    Render records into the accumulator, in the given order.

    Args:
        records: Records to render, already sorted if requested.
        lines: The accumulator list for output lines (no newlines).
        human_readable: Size column as allocated space with G/M/K suffix.
        apparent_bytes: Size column as apparent byte size.
        show_counts: Add the descendant count column.
        include_files: Show non-directory entries too.
    """
    for record in records:
        if not (record.is_dir or include_files):
            continue

        line = format_size_column(
            record,
            human_readable=human_readable,
            apparent_bytes=apparent_bytes,
        ) + "\t"

        if show_counts:
            # Non-directories keep the column, empty.
            if record.is_dir:
                line += f"{record.descendant_count}\t"
            else:
                line += "\t"

        lines.append(line + record.path)
