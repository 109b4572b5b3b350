from __future__ import annotations

"""
Directory Tree Data Models.

Provides the recursive node type used to rebuild a filesystem from a
shell transcript, and the navigation cursor that tracks the current
working directory while the transcript is replayed.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

ROOT_NAME = "/"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class DirectoryNode:
    """
    Represents a single directory in the rebuilt tree.

    Each node exclusively owns its children. Names are unique among
    siblings of the same kind (files vs. subdirectories).

    Attributes:
        files: Mapping of filename to size in bytes.
        subdirectories: Mapping of directory name to child node.
    """
    files: Dict[str, int] = field(default_factory=dict)
    subdirectories: Dict[str, "DirectoryNode"] = field(default_factory=dict)

    def get_or_create_child(self, name: str) -> "DirectoryNode":
        """
        Return the child directory called `name`, inserting an empty one if absent.

        Args:
            name: Directory name relative to this node.

        Returns:
            DirectoryNode: The existing or newly created child.
        """
        child = self.subdirectories.get(name)
        if child is None:
            child = DirectoryNode()
            self.subdirectories[name] = child
        return child

    def add_file(self, name: str, size: int) -> None:
        """
        Record a file under this directory.

        Listing the same file twice keeps a single entry with the latest size.

        Raises:
            ValueError: If `size` is negative.
        """
        if size < 0:
            raise ValueError(f"File size must be non-negative, got {size} for '{name}'.")
        self.files[name] = size

    def iter_directories(self, path: str = ROOT_NAME) -> Iterator[Tuple[str, "DirectoryNode"]]:
        """Yield (absolute_path, node) for this node and every descendant, pre-order."""
        yield path, self
        for name in sorted(self.subdirectories):
            child_path = f"{path.rstrip('/')}/{name}"
            yield from self.subdirectories[name].iter_directories(child_path)

    @property
    def file_count(self) -> int:
        """Number of files anywhere beneath this node."""
        return len(self.files) + sum(d.file_count for d in self.subdirectories.values())


# -----------------------------------------------------------------------------
# NAVIGATION CURSOR
# -----------------------------------------------------------------------------

@dataclass
class NavigationState:
    """
    Current working directory while a transcript is replayed.

    Attributes:
        path: Directory names from the root down to the cwd.
    """
    path: List[str] = field(default_factory=list)

    def reset(self) -> None:
        self.path.clear()

    def pop(self) -> bool:
        """Move one level up. Returns False (and does nothing) at the root."""
        if not self.path:
            return False
        self.path.pop()
        return True

    def push(self, name: str) -> None:
        self.path.append(name)

    def resolve(self, root: DirectoryNode) -> DirectoryNode:
        """
        Walk from `root` along the current path.

        Missing intermediate directories are created on the way.

        Args:
            root: Tree root.

        Returns:
            DirectoryNode: Node for the current working directory.
        """
        node = root
        for name in self.path:
            node = node.get_or_create_child(name)
        return node

    @property
    def cwd(self) -> str:
        return ROOT_NAME + "/".join(self.path)
