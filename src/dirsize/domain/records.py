from __future__ import annotations

"""
Filesystem Record Data Models.

Defines the entry classification and the recursive record produced for
every filesystem entry visited by the scanner.
"""

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

class FileKind(str, Enum):
    """Filesystem entry type, taken from lstat mode bits."""
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHARACTER_DEVICE = "character-device"
    BLOCK_DEVICE = "block-device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> "FileKind":
        """
        Classify an entry from its st_mode.

        Args:
            mode: The st_mode field of an lstat result.

        Returns:
            FileKind: Matching member, UNKNOWN when no predicate matches.
        """
        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISCHR(mode):
            return cls.CHARACTER_DEVICE
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN

# -----------------------------------------------------------------------------
# RECORD MODEL
# -----------------------------------------------------------------------------

@dataclass
class FileRecord:
    """
    One visited filesystem entry.

    Size fields start from the entry's own metadata. For directories the
    scanner folds every child into them as each subtree finishes.

    Attributes:
        path: Display path, also used as identity.
        kind: Entry classification.
        apparent_size: Logical size in bytes.
        allocated_blocks: Allocated 512-byte units.
        descendant_count: Transitive number of nested entries.
        access_time: Last access, integer seconds.
        modify_time: Last modification, integer seconds.
        status_change_time: Last status change, integer seconds.
        children: Direct child records, owned by this record.
    """
    path: str
    kind: FileKind
    apparent_size: int
    allocated_blocks: int
    access_time: int = 0
    modify_time: int = 0
    status_change_time: int = 0
    descendant_count: int = 0
    children: List["FileRecord"] = field(default_factory=list, repr=False)

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "FileRecord":
        """Build a record holding only the entry's own metadata."""
        return cls(
            path=path,
            kind=FileKind.from_mode(st.st_mode),
            apparent_size=int(st.st_size),
            allocated_blocks=int(getattr(st, "st_blocks", 0) or 0),
            access_time=int(st.st_atime),
            modify_time=int(st.st_mtime),
            status_change_time=int(st.st_ctime),
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    def add_child(self, child: "FileRecord") -> None:
        """Attach a finished child and fold its totals into this record."""
        self.children.append(child)
        self.apparent_size += child.apparent_size
        self.allocated_blocks += child.allocated_blocks
        self.descendant_count += 1 + child.descendant_count

    def __hash__(self) -> int:
        return hash(self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileRecord):
            return False
        return self.path == other.path
