from __future__ import annotations

"""
Configuration Domain Management.

Holds the solver defaults and loads optional JSON overrides from disk.
Thresholds are scenario-specific, so they live here rather than in code.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_INPUT_FILE = "input.txt"
DEFAULT_BOUNDED_THRESHOLD = 100_000
DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_REQUIRED_SPACE = 30_000_000

CONFIG_KEYS = (
    "input_path",
    "bounded_threshold",
    "disk_capacity",
    "required_space",
    "render_tree",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_path": os.path.join(os.getcwd(), DEFAULT_INPUT_FILE),
        "bounded_threshold": DEFAULT_BOUNDED_THRESHOLD,
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "required_space": DEFAULT_REQUIRED_SPACE,
        "render_tree": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file and merge them over defaults.

    Unknown keys are dropped. A missing or corrupt file falls back to defaults.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        Dict[str, Any]: Defaults merged with the file contents.
    """
    config = get_default_config()
    if not path or not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load config from '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not contain a JSON object. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    ignored = sorted(set(data) - set(CONFIG_KEYS))
    if ignored:
        logger.debug(f"Ignoring unknown config keys: {ignored}")

    logger.debug(f"Configuration loaded from {path}")
    return config
