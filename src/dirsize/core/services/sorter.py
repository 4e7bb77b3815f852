from __future__ import annotations

"""
Record ordering for reports.
"""

from typing import List

from dirsize.domain.records import FileRecord


def sort_records(records: List[FileRecord], by_size_descending: bool) -> List[FileRecord]:
    """
    Order records for reporting.

    Args:
        records: Flat traversal output.
        by_size_descending: Sort by apparent size, largest first.

    Returns:
        List[FileRecord]: A new list. Traversal order is kept when sorting
                          is disabled, and for equal sizes when enabled.
    """
    if not by_size_descending:
        return list(records)
    return sorted(records, key=lambda r: r.apparent_size, reverse=True)
