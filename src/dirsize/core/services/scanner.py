from __future__ import annotations

"""
Traversal and Aggregation Service.

Walks the filesystem depth-first from a root path without following
symbolic links, builds one record per entry and folds every finished
subtree into its parent directory.
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from dirsize.domain.errors import DirectoryUnreadable, MetadataUnavailable
from dirsize.domain.records import FileRecord
from dirsize.domain.scan_models import ScanIssue, ScanResult

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan(root_path: str, keep_going: bool = False) -> ScanResult:
    """
    Measure every entry below root_path.

    By default the first failure aborts the whole scan. With keep_going,
    failures below the root are recorded as issues and the affected entry
    (or the unreadable directory's contents) is left out.

    The walk keeps its own stack of open directories, so tree depth is not
    bounded by the interpreter's recursion limit.

    Args:
        root_path: Starting path. Descendant paths are built as
                   parent + "/" + name.
        keep_going: Skip failing entries instead of aborting.

    Returns:
        ScanResult: Root record, flat record list and skipped entries.

    Raises:
        MetadataUnavailable: lstat failed, or, as DirectoryUnreadable, a
                             directory could not be listed.
    """
    logger.debug(f"Scanning from root: {root_path}")

    records: List[FileRecord] = []
    issues: List[ScanIssue] = []

    root = _stat_record(root_path, issues, tolerate=False)
    # The root is never skipped, _stat_record raises instead.
    assert root is not None

    stack: List[Tuple[FileRecord, Iterator[str]]] = []
    if root.is_dir:
        stack.append((root, iter(_list_names(root_path, issues, tolerate=False))))
    else:
        records.append(root)

    while stack:
        parent, names = stack[-1]
        name = next(names, None)

        # Directory exhausted: its subtree is complete, fold it upward
        if name is None:
            stack.pop()
            records.append(parent)
            if stack:
                stack[-1][0].add_child(parent)
            continue

        child = _stat_record(f"{parent.path}/{name}", issues, tolerate=keep_going)
        if child is None:
            continue

        if child.is_dir:
            stack.append((child, iter(_list_names(child.path, issues, tolerate=keep_going))))
        else:
            records.append(child)
            parent.add_child(child)

    logger.debug(
        f"Scan finished: {len(records)} entries, "
        f"{root.apparent_size} bytes, {len(issues)} skipped"
    )
    return ScanResult(root=root, records=records, issues=issues)


def traverse(root_path: str) -> List[FileRecord]:
    """
    Return the flat record list for root_path, aborting on any failure.

    Raises:
        MetadataUnavailable: See scan().
    """
    return scan(root_path).records


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stat_record(path: str, issues: List[ScanIssue], tolerate: bool) -> Optional[FileRecord]:
    """Build the record holding path's own metadata; symlinks are not followed."""
    try:
        st = os.lstat(path)
    except OSError as e:
        error = MetadataUnavailable(path, e.strerror or str(e))
        if tolerate:
            _skip(issues, error)
            return None
        raise error from e
    return FileRecord.from_stat(path, st)


def _list_names(path: str, issues: List[ScanIssue], tolerate: bool) -> List[str]:
    """List a directory's entry names; '.' and '..' are never returned."""
    try:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]
    except OSError as e:
        error = DirectoryUnreadable(path, e.strerror or str(e))
        if tolerate:
            _skip(issues, error)
            return []
        raise error from e


def _skip(issues: List[ScanIssue], error: MetadataUnavailable) -> None:
    """Record a tolerated failure."""
    logger.warning(f"Skipping {error.path}: {error.reason}")
    issues.append(ScanIssue(path=error.path, error=str(error)))
