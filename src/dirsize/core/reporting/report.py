from __future__ import annotations

"""
Report Dispatch.

Selects the report format from the run configuration and returns the
rendered lines.
"""

from typing import Any, Dict, Iterable, List

from dirsize.core.reporting.compact import render_compact
from dirsize.core.reporting.detailed import render_detailed
from dirsize.domain.records import FileRecord


def build_report(records: Iterable[FileRecord], config: Dict[str, Any]) -> List[str]:
    """
    Render records according to the report flags of a validated config.

    Detailed mode ignores the size-format flags and the directory filter.

    Args:
        records: Records in their final order.
        config: Normalized configuration dictionary.

    Returns:
        List[str]: Output lines without trailing newlines.
    """
    lines: List[str] = []

    if config.get("detailed"):
        render_detailed(records, lines)
        return lines

    render_compact(
        records,
        lines,
        human_readable=bool(config.get("human_readable")),
        apparent_bytes=bool(config.get("apparent_bytes")),
        show_counts=bool(config.get("show_counts")),
        include_files=bool(config.get("include_files")),
    )
    return lines
