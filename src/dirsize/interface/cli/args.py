from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides. Report flags are single letters recognized by
exact match only; any other dash-prefixed token is dropped before parsing.
"""

import argparse
import logging
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RECOGNIZED OPTIONS
# -----------------------------------------------------------------------------

# Single-letter report flags mapped to configuration keys
REPORT_FLAGS: Dict[str, str] = {
    "-h": "human_readable",
    "-s": "sort_by_size",
    "-n": "show_counts",
    "-b": "apparent_bytes",
    "-a": "include_files",
    "-v": "detailed",
}

_LONG_SWITCHES = ("--help", "--debug", "--keep-going")
_LONG_VALUED = ("--log-file",)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirsize CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirsize",
        description="Report recursive disk usage of a directory tree.",
        add_help=False,
        allow_abbrev=False,
    )

    # --- Target ---
    p.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Directory to measure (last one wins, default: current directory).",
    )

    # --- Report Flags ---
    p.add_argument("-h", dest="human_readable", action="store_true",
                   help="Human-readable sizes (K, M, G) from allocated space.")
    p.add_argument("-s", dest="sort_by_size", action="store_true",
                   help="Sort by apparent size, largest first.")
    p.add_argument("-n", dest="show_counts", action="store_true",
                   help="Show the number of entries below each directory.")
    p.add_argument("-b", dest="apparent_bytes", action="store_true",
                   help="Show apparent sizes in bytes.")
    p.add_argument("-a", dest="include_files", action="store_true",
                   help="Include files, not just directories.")
    p.add_argument("-v", dest="detailed", action="store_true",
                   help="Detailed comma-separated output for every entry.")

    # --- Runtime and Diagnostics ---
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip unreadable entries below the root instead of aborting.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )
    p.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit.",
    )

    return p


def parse_args(argv: List[str]) -> argparse.Namespace:
    """
    Parse a raw argument list, silently dropping unrecognized flags.

    Args:
        argv: Arguments without the program name.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    kept, ignored = filter_tokens(argv)
    for token in ignored:
        logger.debug(f"Ignoring unrecognized flag: {token}")
    return build_parser().parse_intermixed_args(kept)

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = _last_path(args.paths)

    for key in REPORT_FLAGS.values():
        if getattr(args, key, False):
            overrides[key] = True

    if args.keep_going:
        overrides["keep_going"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def filter_tokens(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split argv into tokens for the parser and ignored flag-shaped tokens.

    Recognized options must match exactly, so grouped letters such as
    "-ha" are ignored as a whole. A lone "-" is kept and later rejected
    as a path.
    """
    kept: List[str] = []
    ignored: List[str] = []
    pending_option: Optional[str] = None

    for token in argv:
        if pending_option:
            # Joined so argparse accepts values that start with a dash
            kept.append(f"{pending_option}={token}")
            pending_option = None
            continue

        if not token.startswith("-") or token == "-":
            kept.append(token)
        elif token in REPORT_FLAGS or token in _LONG_SWITCHES:
            kept.append(token)
        elif token in _LONG_VALUED:
            pending_option = token
        elif token.split("=", 1)[0] in _LONG_VALUED:
            kept.append(token)
        else:
            ignored.append(token)

    if pending_option:
        ignored.append(pending_option)

    return kept, ignored


def _last_path(paths: Optional[List[str]]) -> Optional[str]:
    """Last positional that does not start with a dash, if any."""
    candidates = [p for p in (paths or []) if not p.startswith("-")]
    return candidates[-1] if candidates else None
