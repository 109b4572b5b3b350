from __future__ import annotations

"""
Solver Engine.

Orchestrates a full run: read the transcript, rebuild the tree, derive
the deletion threshold from the actual disk usage, aggregate directory
sizes and package both answers into a SolveResult.
"""

import logging
from typing import Any, Dict

from dirsizer.core.analysis.size_aggregator import aggregate_sizes, total_size
from dirsizer.core.analysis.space_calculator import build_space_report
from dirsizer.core.analysis.tree_renderer import render_tree_lines
from dirsizer.core.parsing.transcript_parser import parse_transcript
from dirsizer.domain.result_models import (
    SolveResult,
    create_error_result,
    create_success_result,
)
from dirsizer.infra.fs import read_lines

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_solver(cfg: Dict[str, Any]) -> SolveResult:
    """
    Execute the solver against a validated configuration.

    Args:
        cfg: Configuration as returned by `validate_config`.

    Returns:
        SolveResult: Answers and metrics, or an error result if the
                     input could not be read.
    """
    input_path = cfg["input_path"]
    logger.info(f"Reading transcript: {input_path}")

    # 1. Input
    try:
        lines = read_lines(input_path)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read input '{input_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, input_path)

    # 2. Tree reconstruction
    outcome = parse_transcript(lines)
    if outcome.skipped:
        logger.warning(f"Skipped {outcome.skipped} malformed line(s)")

    # 3. Deletion threshold derived from real usage
    used = total_size(outcome.root)
    space = build_space_report(cfg["disk_capacity"], cfg["required_space"], used)

    # 4. Aggregation
    aggregate = aggregate_sizes(
        outcome.root,
        bounded_threshold=cfg["bounded_threshold"],
        min_threshold=space.space_to_free,
    )

    tree_lines = render_tree_lines(outcome.root) if cfg.get("render_tree") else []

    logger.info(
        f"Solved: bounded_sum={aggregate.bounded_sum}, "
        f"min_candidate={aggregate.min_candidate if aggregate.found else 'not found'}"
    )

    return create_success_result(
        input_path=input_path,
        aggregate=aggregate,
        space=space,
        directory_count=sum(1 for _ in outcome.root.iter_directories()),
        file_count=outcome.root.file_count,
        skipped_lines=outcome.skipped_lines,
        tree_lines=tree_lines,
        summary_extra={
            "lines": len(lines),
            "commands": outcome.commands,
            "bounded_threshold": cfg["bounded_threshold"],
            "min_threshold": space.space_to_free,
        },
    )
