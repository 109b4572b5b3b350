from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the solver engine. Ensures the configuration dictionary
conforms to the expected schema, coercing CLI/JSON inputs into typed
values and injecting defaults where data is missing or unusable.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from dirsizer.domain.config import get_default_config

logger = logging.getLogger(__name__)

_INT_FIELDS = ("bounded_threshold", "disk_capacity", "required_space")
_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}
_FALSE_STRINGS = {"0", "false", "no", "n", "off"}


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

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on bad values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, when a value has the wrong type.
        ValueError: In strict mode, when a numeric value is negative.
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

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["input_path"] = _as_path(merged.get("input_path"), defaults["input_path"], warnings, strict)

    for field in _INT_FIELDS:
        merged[field] = _as_non_negative_int(
            merged.get(field), defaults[field], field, warnings, strict
        )

    merged["render_tree"] = _as_bool(
        merged.get("render_tree"), defaults["render_tree"], "render_tree", warnings, strict
    )

    if merged["required_space"] > merged["disk_capacity"]:
        warnings.append(
            f"required_space ({merged['required_space']}) exceeds disk_capacity "
            f"({merged['disk_capacity']}); no directory may satisfy it."
        )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_path(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Validate the input path and expand user/env shortcuts."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        if not v:
            return fallback
        return os.path.abspath(os.path.expandvars(os.path.expanduser(v)))

    msg = f"Invalid field 'input_path': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_non_negative_int(
        value: Any, fallback: int, field: str, warnings: List[str], strict: bool
) -> int:
    """Coerce ints and numeric strings; reject bools, floats and negatives."""
    if value is None:
        return fallback

    result: Any = None
    if isinstance(value, bool):
        result = None
    elif isinstance(value, int):
        result = value
    elif isinstance(value, str):
        v = value.strip().replace("_", "")
        try:
            result = int(v)
        except ValueError:
            result = None

    if result is None:
        msg = f"Invalid field '{field}': expected int, received {value!r}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if result < 0:
        msg = f"Invalid field '{field}': must be non-negative, received {result}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return result


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce booleans and common truthy/falsy strings."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_STRINGS:
            return True
        if v in _FALSE_STRINGS:
            return False

    msg = f"Invalid field '{field}': expected bool, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
