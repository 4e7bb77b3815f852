from __future__ import annotations

"""
Domain Constants.

Centralizes the allocation unit, binary unit thresholds and the static
labels used by the reporters.
"""

from typing import Dict, List, Tuple

from dirsize.domain.records import FileKind

# -----------------------------------------------------------------------------
# SIZE UNITS
# -----------------------------------------------------------------------------

BLOCK_SIZE = 512
KB = 1024
MB = KB * 1024
GB = MB * 1024

# Checked in order, first threshold exceeded wins. KiB is the fallback.
HUMAN_UNITS: List[Tuple[int, str]] = [
    (GB, "G"),
    (MB, "M"),
]
HUMAN_FALLBACK_UNIT = (KB, "K")

# -----------------------------------------------------------------------------
# DETAILED REPORT
# -----------------------------------------------------------------------------

DETAILED_SEPARATOR = ", "

DETAILED_HEADER: List[str] = [
    "Name",
    "Size (Bytes)",
    "Blocks (512B)",
    "File Type",
    "Num Children",
    "Last Access",
    "Last Modification",
    "Last Status Change",
]

KIND_LABELS: Dict[FileKind, str] = {
    FileKind.REGULAR: "regular",
    FileKind.DIRECTORY: "directory",
    FileKind.CHARACTER_DEVICE: "character device",
    FileKind.BLOCK_DEVICE: "block device",
    FileKind.FIFO: "FIFO, (named pipe)",
    FileKind.SYMLINK: "symbolic link",
    FileKind.SOCKET: "socket",
    FileKind.UNKNOWN: "",
}
