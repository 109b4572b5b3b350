from __future__ import annotations

"""
Unit tests for the Shell Transcript Parser.

Verifies line classification, path resolution across `cd` moves and
tolerant handling of malformed lines.
"""

import logging

import pytest

from dirsizer.core.parsing.transcript_parser import (
    LineKind,
    build_tree,
    classify_line,
    parse_transcript,
)


@pytest.mark.parametrize(
    "line, kind, name, size",
    [
        ("$ cd /", LineKind.CD, "/", None),
        ("$ cd ..", LineKind.CD, "..", None),
        ("$ cd abc", LineKind.CD, "abc", None),
        ("$ ls", LineKind.LS, "", None),
        ("dir xyz", LineKind.DIR, "xyz", None),
        ("14848514 b.txt", LineKind.FILE, "b.txt", 14848514),
        ("0 empty", LineKind.FILE, "empty", 0),
        ("", LineKind.BLANK, "", None),
        ("   \n", LineKind.BLANK, "", None),
        ("$ rm -rf /", LineKind.UNKNOWN, "", None),
        ("$ cd", LineKind.UNKNOWN, "", None),
        ("-5 neg", LineKind.UNKNOWN, "", None),
        ("12abc file", LineKind.UNKNOWN, "", None),
        ("1 2 3", LineKind.UNKNOWN, "", None),
        ("lonely", LineKind.UNKNOWN, "", None),
        ("$ cd a/b", LineKind.UNKNOWN, "", None),
        ("dir a/b", LineKind.UNKNOWN, "", None),
    ],
)
def test_classify_line(line, kind, name, size) -> None:
    parsed = classify_line(line)

    assert parsed.kind is kind
    assert parsed.name == name
    assert parsed.size == size


def test_file_lands_in_sibling_after_parent_move() -> None:
    """cd / ; cd x ; cd .. ; cd y must attach the file to y, sibling of x."""
    root = build_tree(["$ cd /", "$ cd x", "$ cd ..", "$ cd y", "$ ls", "50 f"])

    assert set(root.subdirectories) == {"x", "y"}
    assert root.subdirectories["y"].files == {"f": 50}
    assert root.subdirectories["x"].files == {}
    assert root.files == {}


def test_cd_parent_at_root_is_noop() -> None:
    root = build_tree(["$ cd /", "$ cd ..", "$ cd ..", "10 top"])
    assert root.files == {"top": 10}


def test_cd_root_resets_from_deep_path() -> None:
    root = build_tree(["$ cd a", "$ cd b", "$ cd /", "7 r"])

    assert root.files == {"r": 7}
    assert "b" in root.subdirectories["a"].subdirectories


def test_cd_unknown_name_creates_directory() -> None:
    root = build_tree(["$ cd ghost"])
    assert "ghost" in root.subdirectories


def test_dir_listing_does_not_move_cwd() -> None:
    root = build_tree(["$ cd /", "$ ls", "dir a", "5 f"])

    assert root.files == {"f": 5}
    assert root.subdirectories["a"].files == {}


def test_parse_transcript_counts_and_skips(caplog) -> None:
    lines = ["$ cd /", "$ ls", "dir a", "garbage here too", "", "3 f", "x y"]

    with caplog.at_level(logging.DEBUG, logger="dirsizer.core.parsing.transcript_parser"):
        outcome = parse_transcript(lines)

    assert outcome.commands == 2
    assert outcome.directories == 1
    assert outcome.files == 1
    assert outcome.skipped_lines == [4, 7]
    assert outcome.skipped == 2
    assert "Skipping malformed line 4" in caplog.text


def test_parse_sample_session(sample_lines) -> None:
    root = build_tree(sample_lines)

    assert set(root.subdirectories) == {"a", "d"}
    assert root.subdirectories["a"].subdirectories["e"].files == {"i": 584}
    assert len(root.subdirectories["d"].files) == 4


def test_multi_component_names_are_skipped() -> None:
    outcome = parse_transcript(["$ cd /", "dir a", "$ cd a/b", "dir x/y", "9 f"])

    assert outcome.skipped_lines == [3, 4]
    assert set(outcome.root.subdirectories) == {"a"}
    assert outcome.root.files == {"f": 9}
