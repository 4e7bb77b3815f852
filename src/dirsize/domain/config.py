from __future__ import annotations

"""
Configuration Domain Management.

Holds the default run configuration and the merge policy used to layer
command-line overrides on top of it.
"""

import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ROOT_PATH = "."

REPORT_FLAGS: List[str] = [
    "human_readable",
    "sort_by_size",
    "show_counts",
    "apparent_bytes",
    "include_files",
    "detailed",
]

RUNTIME_FLAGS: List[str] = [
    "keep_going",
]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "root_path": DEFAULT_ROOT_PATH,

        # Report shaping
        "human_readable": False,
        "sort_by_size": False,
        "show_counts": False,
        "apparent_bytes": False,
        "include_files": False,
        "detailed": False,

        # Failure policy
        "keep_going": False,
    }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged and None values never replace a base value.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    known = set(get_default_config())
    for k, v in overrides.items():
        if k not in known:
            logger.debug(f"Ignoring unknown configuration key: {k}")
            continue
        if v is not None:
            out[k] = v
    return out
