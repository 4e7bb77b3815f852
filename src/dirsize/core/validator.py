from __future__ import annotations

"""
Configuration Validation Service.

Normalizes a raw configuration dictionary into the strictly typed form the
scanner and the reporters expect.
"""

import logging
from typing import Any, Dict, List, Tuple

from dirsize.domain.config import (
    DEFAULT_ROOT_PATH,
    REPORT_FLAGS,
    RUNTIME_FLAGS,
    get_default_config,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Missing keys are filled from the defaults, flags are coerced to bool and
    an empty root path falls back to the current directory.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    unknown = sorted(k for k in config if k not in defaults)
    for key in unknown:
        warnings.append(f"Unknown configuration key '{key}' ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    # Root path
    root = merged.get("root_path")
    if root is None or root == "":
        merged["root_path"] = DEFAULT_ROOT_PATH
    elif not isinstance(root, str):
        msg = f"Invalid type for 'root_path': {type(root).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Coerced to string.")
        merged["root_path"] = str(root)

    # Boolean flags
    for key in REPORT_FLAGS + RUNTIME_FLAGS:
        value = merged.get(key)
        if isinstance(value, bool):
            continue
        if strict:
            raise TypeError(f"Invalid type for '{key}': {type(value).__name__}.")
        merged[key] = _coerce_bool(value)
        warnings.append(f"Field '{key}' coerced to {merged[key]}.")

    return merged, warnings


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _coerce_bool(value: Any) -> bool:
    """Interpret common truthy spellings, everything else is False."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
