from __future__ import annotations

"""
Unit tests for the entry point and global supervisor.
"""

import sys
from unittest.mock import patch

import pytest

from dirsize import main as entry


@pytest.fixture(autouse=True)
def keep_excepthook(monkeypatch, reset_logging):
    """main() installs a process-wide hook; restore it afterwards."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_main_routes_to_cli(sample_tree, monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["dirsize", str(sample_tree)])

    assert entry.main() == 0
    assert sys.excepthook is entry.global_exception_handler
    assert capsys.readouterr().out.strip().endswith(str(sample_tree))


def test_main_traps_unexpected_errors(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["dirsize", "."])

    with patch("dirsize.interface.cli.app.main", side_effect=RuntimeError("boom")):
        assert entry.main() == 1

    assert "CRITICAL ERROR (DIRSIZE)" in capsys.readouterr().err
