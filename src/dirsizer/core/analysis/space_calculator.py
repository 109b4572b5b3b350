from __future__ import annotations

"""
Free-Space Calculator.

Derives the minimum directory size whose deletion brings free space up
to the amount an update requires.
"""

import logging

from dirsizer.domain.result_models import SpaceReport

logger = logging.getLogger(__name__)


def compute_space_to_free(capacity: int, required: int, used: int) -> int:
    """
    Return `required - (capacity - used)`.

    A result at or below zero means enough space is already free.
    """
    free = capacity - used
    return required - free


def build_space_report(capacity: int, required: int, used: int) -> SpaceReport:
    """
    Build the full disk usage report for a run.

    Args:
        capacity: Total disk capacity.
        required: Free space needed.
        used: Current root total size.

    Returns:
        SpaceReport: Capacity, usage and derived deletion threshold.
    """
    space_to_free = compute_space_to_free(capacity, required, used)
    report = SpaceReport(
        capacity=capacity,
        required=required,
        used=used,
        free=capacity - used,
        space_to_free=space_to_free,
    )

    if not report.deletion_needed:
        logger.info(
            f"Free space {report.free} already covers the required {required}; "
            f"every directory qualifies"
        )
    else:
        logger.debug(f"Need to free at least {space_to_free} (used={used}, free={report.free})")

    return report
