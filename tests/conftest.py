from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for records, configuration and on-disk trees.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirsize.domain.records import FileKind, FileRecord  # noqa: E402
from dirsize.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "root_path": "/tmp/test_input",
        "human_readable": False,
        "sort_by_size": False,
        "show_counts": False,
        "apparent_bytes": False,
        "include_files": False,
        "detailed": False,
        "keep_going": False,
    }


@pytest.fixture
def make_record() -> Callable[..., FileRecord]:
    """Factory for records with fixed metadata."""
    def _make(
            path: str,
            kind: FileKind = FileKind.REGULAR,
            apparent_size: int = 0,
            allocated_blocks: int = 0,
            **kwargs: Any,
    ) -> FileRecord:
        return FileRecord(
            path=path,
            kind=kind,
            apparent_size=apparent_size,
            allocated_blocks=allocated_blocks,
            **kwargs,
        )
    return _make


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small tree on disk:

        root/
            a.txt            (100 bytes)
            empty/
            sub/
                b.bin        (5000 bytes)
                deeper/
                    c.txt    (10 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 100)
    (root / "empty").mkdir()
    (root / "sub").mkdir()
    (root / "sub" / "b.bin").write_bytes(b"y" * 5000)
    (root / "sub" / "deeper").mkdir()
    (root / "sub" / "deeper" / "c.txt").write_bytes(b"z" * 10)
    return root


@pytest.fixture
def reset_logging():
    """Remove dirsize handlers from the root logger before and after a test."""
    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)
