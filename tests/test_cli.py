# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the command-line entry point and the host-facing API."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from friendly_formatter import format_results
from friendly_formatter.cli.app import EXIT_FAILURE, EXIT_OK, EXIT_PROBLEMS, app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _write_results(path: Path, results: list[dict[str, Any]]) -> Path:
    path.write_text(json.dumps(results), encoding="utf-8")
    return path


def test_errors_exit_with_problem_code(runner: CliRunner, tmp_path: Path, two_message_results) -> None:
    results_file = _write_results(tmp_path / "results.json", two_message_results)

    result = runner.invoke(app, [str(results_file), "--no-color"])

    assert result.exit_code == EXIT_PROBLEMS
    assert "2 problems (1 error, 1 warning)" in result.stdout
    assert "\x1b[" not in result.stdout


def test_empty_stdin_reports_success(runner: CliRunner) -> None:
    result = runner.invoke(app, [], input="[]")

    assert result.exit_code == EXIT_OK
    assert "Success!" in result.stdout


def test_warnings_only_exit_zero(runner: CliRunner, tmp_path: Path, two_message_results) -> None:
    results_file = _write_results(tmp_path / "results.json", two_message_results)

    result = runner.invoke(app, [str(results_file), "--filter", "semi"])

    assert result.exit_code == EXIT_OK
    assert "1 problem (0 errors, 1 warning)" in result.stdout


def test_invalid_input_exits_with_failure(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-"], input="not json")

    assert result.exit_code == EXIT_FAILURE
    assert "invalid JSON" in result.output


def test_unmatched_filter_warns(runner: CliRunner, tmp_path: Path, two_message_results) -> None:
    results_file = _write_results(tmp_path / "results.json", two_message_results)

    result = runner.invoke(app, [str(results_file), "--filter", "eqeqeq"])

    assert result.exit_code == EXIT_OK
    assert "Success!" in result.stdout
    assert "No diagnostics matched rule 'eqeqeq'" in result.output


def test_by_issue_and_plain_rule_names(runner: CliRunner, tmp_path: Path) -> None:
    results = [
        {
            "filePath": "b.js",
            "messages": [
                {"ruleId": "semi", "severity": 1, "message": "m1", "line": 1, "column": 1},
                {"ruleId": "eqeqeq", "severity": 1, "message": "m2", "line": 2, "column": 1},
            ],
        },
        {"filePath": "a.js", "messages": [{"ruleId": "semi", "severity": 1, "message": "m3", "line": 1, "column": 1}]},
    ]
    results_file = _write_results(tmp_path / "results.json", results)

    result = runner.invoke(app, [str(results_file), "--by-issue", "--no-link-rules"])

    assert result.exit_code == EXIT_OK
    assert "https://" not in result.stdout
    assert result.stdout.index("m2") < result.stdout.index("m3") < result.stdout.index("m1")


def test_color_flag_forces_ansi(runner: CliRunner, tmp_path: Path, two_message_results) -> None:
    results_file = _write_results(tmp_path / "results.json", two_message_results)

    result = runner.invoke(app, [str(results_file), "--color"])

    assert "\x1b[" in result.stdout


def test_format_results_reads_process_state(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EFF_NO_LINK_RULES", "true")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr("sys.argv", ["eslint", "--", "--eff-filter", "semi"])
    monkeypatch.chdir(tmp_path)
    results = [
        {
            "filePath": str(tmp_path / "a.js"),
            "messages": [
                {"ruleId": "semi", "severity": 1, "message": "Missing semicolon.", "line": 1, "column": 2},
                {"ruleId": "no-undef", "severity": 2, "message": "'y' is not defined.", "line": 2, "column": 1},
            ],
        }
    ]

    text = format_results(results)

    assert "1 problem (0 errors, 1 warning)" in text
    assert "not defined" not in text
    assert "https://" not in text
    assert "\x1b[" not in text
