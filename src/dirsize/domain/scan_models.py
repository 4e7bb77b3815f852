from __future__ import annotations

"""
Scan Result Data Models.

Carries the output of one traversal from the scanner to the sorter and
the reporters.
"""

from dataclasses import dataclass, field
from typing import List

from dirsize.domain.records import FileRecord


@dataclass(frozen=True)
class ScanIssue:
    """
    An entry skipped during a keep-going scan.

    Attributes:
        path: Path that failed.
        error: Descriptive error message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class ScanResult:
    """
    Complete result of a traversal.

    Attributes:
        root: Record of the starting path, holding the whole tree.
        records: Flat list with one record per visited entry, children
                 before their parent.
        issues: Entries skipped in keep-going mode.
    """
    root: FileRecord
    records: List[FileRecord] = field(default_factory=list)
    issues: List[ScanIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues
