from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of single-letter flags to configuration keys.
2. Root path resolution (last positional wins).
3. Silent dropping of unrecognized flags.
"""

import pytest

from dirsize.interface.cli.args import args_to_overrides, filter_tokens, parse_args


def overrides_for(arg_list):
    """Helper to simulate CLI argument parsing."""
    return args_to_overrides(parse_args(arg_list))


def test_cli_simple_flags_mapping():
    """Verify every report flag maps to its configuration key."""
    overrides = overrides_for(["-h", "-s", "-n", "-b", "-a", "-v"])

    assert overrides["human_readable"] is True
    assert overrides["sort_by_size"] is True
    assert overrides["show_counts"] is True
    assert overrides["apparent_bytes"] is True
    assert overrides["include_files"] is True
    assert overrides["detailed"] is True
    assert "keep_going" not in overrides


def test_cli_no_arguments():
    overrides = overrides_for([])

    assert overrides == {"root_path": None}


def test_cli_flags_are_order_independent_and_repeatable():
    a = overrides_for(["/data", "-s", "-a", "-s"])
    b = overrides_for(["-a", "-s", "/data"])

    assert a == b
    assert a["root_path"] == "/data"


def test_cli_last_path_wins():
    overrides = overrides_for(["/first", "-n", "/second", "/third"])

    assert overrides["root_path"] == "/third"
    assert overrides["show_counts"] is True


def test_cli_unknown_flags_are_ignored():
    overrides = overrides_for(["-x", "--colour", "-ha", "-5", "/data"])

    assert overrides == {"root_path": "/data"}


def test_cli_lone_dash_is_not_a_path():
    overrides = overrides_for(["/data", "-"])

    assert overrides["root_path"] == "/data"


def test_cli_runtime_options():
    args = parse_args(["--keep-going", "--debug", "--log-file", "/tmp/dirsize.log", "."])

    assert args.debug is True
    assert args.log_file == "/tmp/dirsize.log"
    assert args_to_overrides(args)["keep_going"] is True


def test_cli_log_file_equals_form():
    args = parse_args(["--log-file=/tmp/x.log"])

    assert args.log_file == "/tmp/x.log"


def test_filter_tokens_keeps_log_file_value_even_if_dashed():
    kept, ignored = filter_tokens(["--log-file", "-odd.log", "-q"])

    assert kept == ["--log-file=-odd.log"]
    assert ignored == ["-q"]


def test_cli_help_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--help"])

    assert exc_info.value.code == 0
    assert "dirsize" in capsys.readouterr().out
