from __future__ import annotations

"""
Solver Domain Data Models.

Defines the immutable structures that carry aggregation metrics and
final answers from the solver engine to the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# AGGREGATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SizeAggregate:
    """
    Output of a full-tree size aggregation pass.

    Attributes:
        root_size: Total size of the root directory.
        bounded_sum: Sum of every directory total not exceeding the bound.
        min_candidate: Smallest directory total at or above the lower bound,
                       or None when no directory qualifies.
        directory_sizes: Directory totals keyed by absolute path.
    """
    root_size: int
    bounded_sum: int
    min_candidate: Optional[int]
    directory_sizes: Dict[str, int] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.min_candidate is not None


@dataclass(frozen=True)
class SpaceReport:
    """
    Disk usage figures used to derive the deletion threshold.

    Attributes:
        capacity: Total disk capacity.
        required: Free space needed for the update.
        used: Space currently used (root total size).
        free: capacity - used.
        space_to_free: Minimum size a deleted directory must have.
    """
    capacity: int
    required: int
    used: int
    free: int
    space_to_free: int

    @property
    def deletion_needed(self) -> bool:
        return self.space_to_free > 0


# -----------------------------------------------------------------------------
# SOLVER RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SolveResult:
    """
    Unified result object of a complete solver run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Transcript file that was processed.
        bounded_sum: First answer.
        min_candidate: Second answer, None when no directory qualifies.
        root_size: Total size of the rebuilt tree.
        space: Free-space figures, None on failure.
        directory_count: Number of directories in the tree (root included).
        file_count: Number of files in the tree.
        directory_sizes: Directory totals keyed by absolute path.
        skipped_lines: 1-based numbers of transcript lines that were ignored.
        tree_lines: Rendered tree, empty unless requested.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str
    input_path: str

    bounded_sum: int = 0
    min_candidate: Optional[int] = None
    root_size: int = 0
    space: Optional[SpaceReport] = None

    directory_count: int = 0
    file_count: int = 0
    directory_sizes: Dict[str, int] = field(default_factory=dict)
    skipped_lines: List[int] = field(default_factory=list)

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str,
        summary_extra: Optional[Dict[str, Any]] = None
) -> SolveResult:
    """
    Create a failed solver result instance.

    Args:
        error: Detailed error description.
        input_path: The transcript file that was targeted.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        SolveResult: An immutable error result object.
    """
    return SolveResult(
        ok=False,
        error=error,
        input_path=input_path,
        summary=summary_extra or {},
    )


def create_success_result(
        input_path: str,
        aggregate: SizeAggregate,
        space: SpaceReport,
        directory_count: int,
        file_count: int,
        skipped_lines: Optional[List[int]] = None,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> SolveResult:
    """
    Create a successful solver result instance.

    Args:
        input_path: The processed transcript file.
        aggregate: Output of the size aggregation pass.
        space: Free-space figures for the run.
        directory_count: Directories in the rebuilt tree.
        file_count: Files in the rebuilt tree.
        skipped_lines: Line numbers ignored by the parser.
        tree_lines: Optional rendered tree.
        summary_extra: Final execution metrics.

    Returns:
        SolveResult: An immutable success result object.
    """
    return SolveResult(
        ok=True,
        error="",
        input_path=input_path,
        bounded_sum=aggregate.bounded_sum,
        min_candidate=aggregate.min_candidate,
        root_size=aggregate.root_size,
        space=space,
        directory_count=directory_count,
        file_count=file_count,
        directory_sizes=dict(aggregate.directory_sizes),
        skipped_lines=skipped_lines or [],
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
