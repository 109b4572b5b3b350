from __future__ import annotations

"""
Tree Renderer.

Converts the rebuilt DirectoryNode tree into a visual ASCII representation,
annotating each directory with its recursive total and each file with its size.
"""

from typing import Dict, List, Optional

from dirsizer.core.analysis.size_aggregator import collect_directory_sizes
from dirsizer.domain.tree_models import ROOT_NAME, DirectoryNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_lines(root: DirectoryNode, show_sizes: bool = True) -> List[str]:
    """
    Render the whole tree, starting with a line for the root itself.

    Args:
        root: Tree root.
        show_sizes: Append size annotations to every entry.

    Returns:
        List[str]: Visual lines of the tree.
    """
    sizes = collect_directory_sizes(root) if show_sizes else {}
    lines = [_dir_label(ROOT_NAME, sizes.get(ROOT_NAME))]
    render_tree(root, lines, prefix="", show_sizes=show_sizes, path=ROOT_NAME, sizes=sizes)
    return lines


def render_tree(
        node: DirectoryNode,
        lines: List[str],
        prefix: str = "",
        show_sizes: bool = True,
        path: str = ROOT_NAME,
        sizes: Optional[Dict[str, int]] = None,
) -> None:
    """
    Recursively append the children of `node` to `lines`.

    Directories are listed before files, each group sorted by name. Uses
    the standard ASCII connectors (├──, └──) for nesting.

    Args:
        node: Directory whose contents are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_sizes: Append size annotations to every entry.
        path: Absolute path of `node`.
        sizes: Precomputed directory totals keyed by absolute path.
    """
    if show_sizes and sizes is None:
        sizes = collect_directory_sizes(node)
        # Keys from a sub-tree pass are relative to `node`; re-anchor them at `path`
        sizes = {_join(path, key) if key != ROOT_NAME else path: v for key, v in sizes.items()}

    dir_names = sorted(node.subdirectories)
    file_names = sorted(node.files)
    total = len(dir_names) + len(file_names)

    for i, name in enumerate(dir_names):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        child_path = _join(path, name)
        child_size = sizes.get(child_path) if show_sizes and sizes else None

        lines.append(f"{prefix}{connector}{_dir_label(name, child_size)}")
        new_prefix = prefix + ("    " if is_last else "│   ")
        render_tree(
            node.subdirectories[name],
            lines,
            prefix=new_prefix,
            show_sizes=show_sizes,
            path=child_path,
            sizes=sizes,
        )

    for j, name in enumerate(file_names, start=len(dir_names)):
        connector = "└── " if j == total - 1 else "├── "
        label = f"{name} (size={node.files[name]})" if show_sizes else name
        lines.append(f"{prefix}{connector}{label}")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _dir_label(name: str, size: Optional[int]) -> str:
    label = name if name.endswith("/") else f"{name}/"
    if size is not None:
        label += f" (dir, total={size})"
    return label


def _join(parent: str, name: str) -> str:
    return f"{parent.rstrip('/')}/{name.lstrip('/')}"
