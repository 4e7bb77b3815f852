from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution, traversal, ordering and report rendering, and the mapping of
failures to exit codes.
"""

import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from dirsize.core.reporting.report import build_report
from dirsize.core.services.scanner import scan
from dirsize.core.services.sorter import sort_records
from dirsize.core.validator import validate_config
from dirsize.domain.config import get_default_config, merge_config
from dirsize.domain.errors import MetadataUnavailable
from dirsize.infra.logging import LoggingConfig, configure_logging, get_logger
from dirsize.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if argv is None:
        argv = sys.argv[1:]

    # 1. Argument parsing phase
    args = cli_args.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Resolve configuration (defaults + CLI overrides)
    raw_conf = merge_config(get_default_config(), cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"Resolved configuration: {config}")

    # 4. Traversal, ordering and rendering
    try:
        return run(config)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED


def run(config: Dict[str, Any], out: Optional[TextIO] = None) -> int:
    """
    Scan, sort and report for a validated configuration.

    Nothing is written to out unless the scan completes.

    Args:
        config: Normalized configuration dictionary.
        out: Report stream. Defaults to sys.stdout.

    Returns:
        int: Process exit code.
    """
    stream = out if out is not None else sys.stdout
    root_path = config["root_path"]

    try:
        result = scan(root_path, keep_going=bool(config.get("keep_going")))
    except MetadataUnavailable as e:
        logger.error(f"{e} ({e.reason})" if e.reason else str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    records = sort_records(result.records, bool(config.get("sort_by_size")))

    _write_lines(stream, build_report(records, config))

    if not result.ok:
        logger.warning(f"{len(result.issues)} entries could not be read and were skipped.")
        return EXIT_FAILURE

    return EXIT_OK


def _write_lines(stream: TextIO, lines: List[str]) -> None:
    """
    Write report lines, reproducing path names byte for byte.

    Names that are not valid in the filesystem encoding arrive as lone
    surrogates; they go back to their raw bytes through os.fsencode on the
    underlying binary buffer. Streams without one get the text as is.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        for line in lines:
            stream.write(line + "\n")
        stream.flush()
        return

    stream.flush()
    for line in lines:
        buffer.write(os.fsencode(line) + b"\n")
    buffer.flush()

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
