from __future__ import annotations

"""
Unit tests for the CLI controller, run in-process.

Verifies output formatting, exit codes and configuration precedence.
"""

import json
from pathlib import Path

import pytest

from dirsizer.infra.logging import shutdown_logging
from dirsizer.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    shutdown_logging()


def test_cli_prints_both_answers(sample_input_file: Path, capsys) -> None:
    code = main(["-i", str(sample_input_file)])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[:2] == ["Sol 1: 95437", "Sol 2: 24933642"]


def test_cli_reports_not_found(tmp_path: Path, capsys) -> None:
    path = tmp_path / "input.txt"
    path.write_text("$ cd /\n$ ls\n10 f\n", encoding="utf-8")

    # Needs 40 to be freed, but the whole disk only holds 10
    code = main(["-i", str(path), "--capacity", "50", "--required", "80"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == ["Sol 1: 10", "Sol 2: not found"]


def test_cli_missing_input_exits_2(tmp_path: Path, capsys) -> None:
    code = main(["-i", str(tmp_path / "absent.txt")])

    assert code == 2
    assert "ERROR" in capsys.readouterr().err


def test_cli_json_output(sample_input_file: Path, capsys) -> None:
    code = main(["-i", str(sample_input_file), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["bounded_sum"] == 95437
    assert payload["min_candidate"] == 24933642
    assert payload["space"]["space_to_free"] == 8381165


def test_cli_tree_output(sample_input_file: Path, capsys) -> None:
    main(["-i", str(sample_input_file), "--tree"])

    out = capsys.readouterr().out
    assert "/ (dir, total=48381165)" in out
    assert "│   └── h.lst (size=62596)" in out


def test_cli_config_file_and_override_precedence(sample_input_file: Path, tmp_path: Path, capsys) -> None:
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(
        json.dumps({"input_path": str(sample_input_file), "bounded_threshold": 1000}),
        encoding="utf-8",
    )

    main(["--config", str(cfg_path), "--dump-config"])
    from_file = json.loads(capsys.readouterr().out)
    assert from_file["bounded_threshold"] == 1000

    main(["--config", str(cfg_path), "--threshold", "600"])
    out = capsys.readouterr().out.splitlines()
    # Only /a/e (584) stays under 600
    assert out[0] == "Sol 1: 584"


def test_merge_config_ignores_none_and_unknown() -> None:
    merged = _merge_config(
        {"bounded_threshold": 1, "disk_capacity": 2},
        {"bounded_threshold": None, "disk_capacity": 3, "junk": 4},
    )

    assert merged == {"bounded_threshold": 1, "disk_capacity": 3}


def test_cli_malformed_threshold_falls_back_to_default(sample_input_file: Path, capsys) -> None:
    code = main(["-i", str(sample_input_file), "--threshold=--5"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == "Sol 1: 95437"


def test_cli_transcript_without_files(tmp_path: Path, capsys) -> None:
    """An empty disk needs no deletion, so the empty root itself is the smallest candidate."""
    path = tmp_path / "input.txt"
    path.write_text("$ cd /\n$ ls\n", encoding="utf-8")

    code = main(["-i", str(path)])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == ["Sol 1: 0", "Sol 2: 0"]
