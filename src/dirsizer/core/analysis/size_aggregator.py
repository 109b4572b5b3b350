from __future__ import annotations

"""
Directory Size Aggregator.

Computes recursive directory totals in a single depth-first, post-order
pass. Running figures are threaded through the recursion in an explicit
accumulator, so the pass is a pure function of the tree.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from dirsizer.domain.result_models import SizeAggregate
from dirsizer.domain.tree_models import ROOT_NAME, DirectoryNode

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    bounded_threshold: int
    min_threshold: int
    bounded_sum: int = 0
    min_candidate: Optional[int] = None
    sizes: Dict[str, int] = field(default_factory=dict)

    def record(self, path: str, size: int) -> None:
        self.sizes[path] = size
        if size <= self.bounded_threshold:
            self.bounded_sum += size
        if size >= self.min_threshold:
            if self.min_candidate is None or size < self.min_candidate:
                self.min_candidate = size

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def total_size(node: DirectoryNode) -> int:
    """
    Return the size of all files under `node`, nested directories included.

    Args:
        node: Directory to measure.

    Returns:
        int: Non-negative total in bytes.
    """
    return sum(node.files.values()) + sum(
        total_size(child) for child in node.subdirectories.values()
    )


def aggregate_sizes(
        root: DirectoryNode,
        bounded_threshold: int,
        min_threshold: int,
) -> SizeAggregate:
    """
    Aggregate directory totals over the whole tree.

    Every directory, the root included, contributes to both figures.

    Args:
        root: Tree root.
        bounded_threshold: Totals at or below this are summed.
        min_threshold: Smallest total at or above this is reported.

    Returns:
        SizeAggregate: Root size, bounded sum and candidate minimum.
                       `min_candidate` is None when nothing qualifies.
    """
    acc = _Accumulator(bounded_threshold=bounded_threshold, min_threshold=min_threshold)
    root_size = _visit(root, ROOT_NAME, acc)

    if acc.min_candidate is None:
        logger.info(f"No directory of at least {min_threshold} found")

    return SizeAggregate(
        root_size=root_size,
        bounded_sum=acc.bounded_sum,
        min_candidate=acc.min_candidate,
        directory_sizes=acc.sizes,
    )


def collect_directory_sizes(root: DirectoryNode) -> Dict[str, int]:
    """Return every directory total keyed by absolute path."""
    acc = _Accumulator(bounded_threshold=-1, min_threshold=-1)
    _visit(root, ROOT_NAME, acc)
    return acc.sizes

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _visit(node: DirectoryNode, path: str, acc: _Accumulator) -> int:
    """Post-order traversal: children first, then the node itself."""
    size = sum(node.files.values())
    for name, child in node.subdirectories.items():
        size += _visit(child, _join(path, name), acc)
    acc.record(path, size)
    return size


def _join(parent: str, name: str) -> str:
    return f"{parent.rstrip('/')}/{name}"
