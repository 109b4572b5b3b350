from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, optional JSON file, CLI overrides), validation, solver
execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dirsizer.core.pipeline.engine import run_solver
from dirsizer.core.pipeline.validator import validate_config
from dirsizer.domain.config import CONFIG_KEYS, get_default_config, load_config
from dirsizer.domain.result_models import SolveResult
from dirsizer.infra.fs import is_readable_file
from dirsizer.infra.logging import LoggingConfig, configure_logging, get_logger
from dirsizer.interface.cli import args as cli_args

logger = get_logger(__name__)

NOT_FOUND_LABEL = "not found"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 solver failure, 2 missing input).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Base configuration (defaults vs JSON file)
    base_conf = load_config(args.config_path) if args.config_path else get_default_config()

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not is_readable_file(input_path):
        msg = f"Input file does not exist or is not readable: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 6. Solver execution phase
    try:
        result = run_solver(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides for known keys into the base configuration.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def format_answers(result: SolveResult) -> List[str]:
    """Return the two answer lines for a successful result."""
    second = result.min_candidate if result.min_candidate is not None else NOT_FOUND_LABEL
    return [f"Sol 1: {result.bounded_sum}", f"Sol 2: {second}"]


def _print_human_summary(result: SolveResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    for line in format_answers(result):
        print(line)

    if result.tree_lines:
        print()
        print("\n".join(result.tree_lines))


if __name__ == "__main__":
    sys.exit(main())
