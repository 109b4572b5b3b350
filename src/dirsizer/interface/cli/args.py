from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirsizer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirsizer",
        description="Rebuild a directory tree from a cd/ls transcript and report directory sizes.",
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file to read (default: ./input.txt).",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration overrides.",
    )

    # --- Thresholds ---
    p.add_argument(
        "--threshold",
        dest="bounded_threshold",
        default=None,
        help="Sum directories whose total is at most this size (default: 100000).",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        default=None,
        help="Total disk capacity (default: 70000000).",
    )
    p.add_argument(
        "--required",
        dest="required_space",
        default=None,
        help="Free space required for the update (default: 30000000).",
    )

    # --- Output ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the rebuilt tree after the answers.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the full result as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left unset on the command line map to None and are ignored
    when merging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "bounded_threshold": args.bounded_threshold,
        "disk_capacity": args.disk_capacity,
        "required_space": args.required_space,
    }

    if args.tree:
        overrides["render_tree"] = True

    return overrides
