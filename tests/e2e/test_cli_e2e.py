from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stdout answers and stderr diagnostics.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "dirsizer" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


def test_e2e_sample_answers(sample_input_file: Path) -> None:
    result = run_cli(["-i", str(sample_input_file)])

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["Sol 1: 95437", "Sol 2: 24933642"]


def test_e2e_default_input_in_cwd(sample_input_file: Path) -> None:
    result = run_cli([], cwd=sample_input_file.parent)

    assert result.returncode == 0, result.stderr
    assert "Sol 1: 95437" in result.stdout


def test_e2e_missing_input(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "nope.txt")])

    assert result.returncode == 2
    assert "ERROR" in result.stderr
    assert result.stdout == ""


def test_e2e_json(sample_input_file: Path) -> None:
    result = run_cli(["-i", str(sample_input_file), "--json"])

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["root_size"] == 48381165


def test_e2e_debug_logs_to_stderr(sample_input_file: Path) -> None:
    result = run_cli(["-i", str(sample_input_file), "--debug"])

    assert result.returncode == 0
    assert "DEBUG" in result.stderr
    assert "DEBUG" not in result.stdout
