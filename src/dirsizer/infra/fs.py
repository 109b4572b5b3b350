from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over file reads so the solver engine never touches `open`
directly.
"""

import os
from typing import List


def read_lines(path: str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines without line terminators.

    Raises:
        OSError: If the file is missing or unreadable.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def is_readable_file(path: str) -> bool:
    """Check that `path` exists, is a regular file and can be opened for reading."""
    return bool(path) and os.path.isfile(path) and os.access(path, os.R_OK)
