from __future__ import annotations

"""
Integration tests for report output of paths that are not valid UTF-8.

stdout is captured as raw bytes so names reach the assertions exactly as
the filesystem stores them.
"""

import io
import os
from pathlib import Path

import pytest

from dirsize.infra.logging import shutdown_logging
from dirsize.interface.cli.app import EXIT_OK, _write_lines, main

_RAW_NAME = b"bad\xff"


@pytest.fixture(autouse=True)
def isolated_logging(capsysbinary):
    """Logging handlers must not outlive the captured streams."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def undecodable_tree(sample_tree: Path) -> Path:
    try:
        os.mkdir(os.path.join(os.fsencode(str(sample_tree)), _RAW_NAME))
    except OSError:
        pytest.skip("filesystem rejects names that are not valid UTF-8")
    return sample_tree


def test_compact_report_writes_raw_name_bytes(undecodable_tree: Path, capsysbinary) -> None:
    assert main(["-b", str(undecodable_tree)]) == EXIT_OK

    lines = capsysbinary.readouterr().out.splitlines()
    assert any(line.endswith(b"\t" + os.fsencode(str(undecodable_tree)) + b"/bad\xff") for line in lines)
    assert len(lines) == 5


def test_detailed_report_writes_raw_name_bytes(undecodable_tree: Path, capsysbinary) -> None:
    assert main(["-v", str(undecodable_tree)]) == EXIT_OK

    out = capsysbinary.readouterr().out
    assert os.fsencode(str(undecodable_tree)) + b"/bad\xff, " in out


def test_text_only_stream_receives_lines_unchanged() -> None:
    stream = io.StringIO()

    _write_lines(stream, ["4\t/tmp/x", "8\t/tmp"])

    assert stream.getvalue() == "4\t/tmp/x\n8\t/tmp\n"
