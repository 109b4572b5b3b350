from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package is importable.
2. Provides shared transcript fixtures used across unit and e2e tests.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


@pytest.fixture
def sample_lines() -> List[str]:
    """
    Return the classic example session.

    Totals: / = 48381165, /a = 94853, /a/e = 584, /d = 24933642.
    """
    return SAMPLE_TRANSCRIPT.splitlines()


@pytest.fixture
def sample_input_file(tmp_path: Path) -> Path:
    """Write the example session to a temporary input file."""
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_TRANSCRIPT, encoding="utf-8")
    return path
