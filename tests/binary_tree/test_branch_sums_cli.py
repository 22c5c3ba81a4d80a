"""Tests for the ``branch_sums`` CLI demonstration script."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import branch_sums  # noqa: E402  -- imported after path mutation for pytest


def test_cli_outputs_expected_demo_lines(capsys) -> None:
    """Ensure the CLI emits the documented demonstration output."""

    importlib.reload(branch_sums)
    assert branch_sums.main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0:5] == [
        "Left-heavy tree: Left (left=14, right=2) (expected: Left)",
        "3",
        "6 2",
        "9 -1 10 ·",
        "",
    ]
    assert lines[5:10] == [
        "Right-heavy tree: Right (left=9, right=100) (expected: Right)",
        "1",
        "4 100",
        "5 · · ·",
        "",
    ]
    assert lines[10] == "Balanced tree: Equal (left=11, right=11) (expected: Equal)"
    assert lines[15:18] == [
        "Empty tree: Empty (left=0, right=0) (expected: Empty)",
        "<empty>",
        "",
    ]
    assert lines[18:20] == [
        "Root-only tree: Root (left=0, right=0) (expected: Root)",
        "1",
    ]


def test_cli_classifies_user_arrays(capsys) -> None:
    assert branch_sums.main(["1,4,100,5", "5,0,0"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Right (left=9, right=100)"
    assert "Equal (left=0, right=0)" in lines


def test_parse_level_order_handles_missing_tokens() -> None:
    assert branch_sums.parse_level_order("3, null,2,,1.5") == [3, None, 2, None, 1.5]
    assert branch_sums.parse_level_order("") == []


def test_cli_rejects_non_numeric_tokens(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        branch_sums.main(["1,two,3"])
    assert excinfo.value.code == 2
    assert "Invalid node value" in capsys.readouterr().err


def test_cli_logs_invalid_trees(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="branch_sums"):
        assert branch_sums.main(["null,1,2"]) == 1
    assert "root of a tree cannot be None" in caplog.text


def test_demo_expectation_mismatch_raises() -> None:
    case = branch_sums.DemoCase(name="Broken", values=[1, 2, 3], expected_label="Left")
    with pytest.raises(RuntimeError, match="expectation mismatch"):
        branch_sums._format_demo_report(case)


def test_cli_accepts_negative_roots(capsys) -> None:
    assert branch_sums.main(["-3,6,2"]) == 0
    assert branch_sums.main(["-3,-1,-2", "--log-level", "ERROR"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Left (left=6, right=2)"
    assert "Left (left=-1, right=-2)" in lines
