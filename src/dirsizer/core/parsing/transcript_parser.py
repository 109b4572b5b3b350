from __future__ import annotations

"""
Shell Transcript Parser.

Replays a `cd` / `ls` terminal session line by line and rebuilds the
directory tree it describes. Parsing is tolerant: lines that do not match
the transcript grammar are counted and skipped, never raised.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from dirsizer.domain.tree_models import DirectoryNode, NavigationState

logger = logging.getLogger(__name__)

PROMPT = "$"
CMD_CD = "cd"
CMD_LS = "ls"
DIR_MARKER = "dir"
CD_ROOT = "/"
CD_PARENT = ".."
# Directory names are single path components
PATH_SEP = "/"


class LineKind(Enum):
    CD = "cd"
    LS = "ls"
    DIR = "dir"
    FILE = "file"
    BLANK = "blank"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedLine:
    """
    A single classified transcript line.

    Attributes:
        kind: Line category.
        name: Target of `cd`, or the listed directory/file name.
        size: File size for FILE lines.
    """
    kind: LineKind
    name: str = ""
    size: Optional[int] = None


@dataclass
class ParseOutcome:
    """
    Rebuilt tree plus parsing statistics.

    Attributes:
        root: Root directory node.
        commands: Number of `$` command lines applied.
        directories: Number of `dir` listing lines applied.
        files: Number of file listing lines applied.
        skipped_lines: 1-based numbers of ignored lines.
    """
    root: DirectoryNode
    commands: int = 0
    directories: int = 0
    files: int = 0
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.skipped_lines)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_line(line: str) -> ParsedLine:
    """
    Tokenize one transcript line.

    Recognised shapes are `$ cd <name>`, `$ ls`, `dir <name>` and
    `<size> <name>`. Directory names containing `/` (other than `cd /`)
    are UNKNOWN, as is anything else.

    Args:
        line: Raw line, with or without trailing newline.

    Returns:
        ParsedLine: The classified line.
    """
    tokens = line.split()
    if not tokens:
        return ParsedLine(LineKind.BLANK)

    if tokens[0] == PROMPT:
        if len(tokens) == 3 and tokens[1] == CMD_CD:
            target = tokens[2]
            if target != CD_ROOT and PATH_SEP in target:
                return ParsedLine(LineKind.UNKNOWN)
            return ParsedLine(LineKind.CD, name=target)
        if len(tokens) == 2 and tokens[1] == CMD_LS:
            return ParsedLine(LineKind.LS)
        return ParsedLine(LineKind.UNKNOWN)

    if len(tokens) != 2:
        return ParsedLine(LineKind.UNKNOWN)

    head, name = tokens
    if head == DIR_MARKER:
        if PATH_SEP in name:
            return ParsedLine(LineKind.UNKNOWN)
        return ParsedLine(LineKind.DIR, name=name)

    # isdecimal() rejects signs, so negative sizes never reach the tree
    if head.isdecimal():
        return ParsedLine(LineKind.FILE, name=name, size=int(head))

    return ParsedLine(LineKind.UNKNOWN)


def parse_transcript(lines: Iterable[str]) -> ParseOutcome:
    """
    Rebuild the directory tree described by a transcript.

    Args:
        lines: Transcript lines in session order.

    Returns:
        ParseOutcome: Tree root and parsing counters.
    """
    outcome = ParseOutcome(root=DirectoryNode())
    nav = NavigationState()

    for line_no, raw in enumerate(lines, start=1):
        parsed = classify_line(raw)

        if parsed.kind is LineKind.BLANK:
            continue

        if parsed.kind is LineKind.UNKNOWN:
            logger.debug(f"Skipping malformed line {line_no}: {raw.rstrip()!r}")
            outcome.skipped_lines.append(line_no)
            continue

        if parsed.kind is LineKind.CD:
            _apply_cd(nav, outcome.root, parsed.name, line_no)
            outcome.commands += 1
        elif parsed.kind is LineKind.LS:
            outcome.commands += 1
        elif parsed.kind is LineKind.DIR:
            nav.resolve(outcome.root).get_or_create_child(parsed.name)
            outcome.directories += 1
        elif parsed.kind is LineKind.FILE and parsed.size is not None:
            nav.resolve(outcome.root).add_file(parsed.name, parsed.size)
            outcome.files += 1

    logger.debug(
        f"Transcript parsed: {outcome.commands} commands, {outcome.directories} dirs, "
        f"{outcome.files} files, {outcome.skipped} skipped"
    )
    return outcome


def build_tree(lines: Iterable[str]) -> DirectoryNode:
    """Rebuild the directory tree and return its root."""
    return parse_transcript(lines).root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _apply_cd(nav: NavigationState, root: DirectoryNode, target: str, line_no: int) -> None:
    """Update the cursor for a `cd` command, creating the target if needed."""
    if target == CD_ROOT:
        nav.reset()
        return

    if target == CD_PARENT:
        if not nav.pop():
            logger.debug(f"Line {line_no}: 'cd ..' at root ignored")
        return

    nav.resolve(root).get_or_create_child(target)
    nav.push(target)
    logger.debug(f"Line {line_no}: cwd is now {nav.cwd}")
