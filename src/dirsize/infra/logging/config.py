from __future__ import annotations

"""
Logging settings for a dirsize run.

The report owns stdout, so every log destination here is either stderr or
a file.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names, case-insensitive
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    How diagnostics of one run are emitted.

    Attributes:
        level: Level name; unknown names mean WARNING.
        console: Send records to stderr, next to error messages.
        log_file: Keep a copy of the records in this file (--log-file).
        max_bytes: Size at which the log file is rolled over.
        backup_count: Rolled-over files kept beside the active one.
        console_fmt: Short format for stderr, without timestamps.
        file_fmt: Format for file lines, including the logger name.
        datefmt: Timestamp format of file lines.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
