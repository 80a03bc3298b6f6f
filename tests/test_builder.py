# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the report builder."""

from __future__ import annotations

import os
import re
from pathlib import Path

from friendly_formatter.console import strip_ansi
from friendly_formatter.models import DiagnosticMessage, FileResult, ReportEntry
from friendly_formatter.reporting.builder import (
    build_report,
    caret_pointer,
    collect_entries,
    display_path,
    render_report,
    sort_entries,
    strip_trailing_period,
)

_SUMMARY_RE = re.compile(r"(\d+) problems? \((\d+) errors?, (\d+) warnings?\)")


def _entry(
    path: str,
    *,
    severity: int = 1,
    rule: str | None = "semi",
    line: int = 1,
    column: int = 1,
    text: str = "",
) -> ReportEntry:
    message = DiagnosticMessage(rule_id=rule, severity=severity, line=line, column=column, message=text)
    return ReportEntry(file_path=path, message=message)


def test_two_message_example_orders_warning_first(make_options, two_message_results) -> None:
    rendered = render_report(two_message_results, make_options())

    assert rendered.totals.errors == 1
    assert rendered.totals.warnings == 1
    assert rendered.totals.total == 2
    text = rendered.text
    assert "2 problems (1 error, 1 warning)" in text
    assert text.index("Missing semicolon") < text.index("'x' is defined but never used")
    assert "'x' is defined but never used." not in text
    assert "Errors:" in text
    assert "Warnings:" in text


def test_row_layout_places_location_block_under_row(make_options, two_message_results) -> None:
    text = build_report(two_message_results, make_options(no_link_rules=True))
    location = os.path.join("src", "app.js")

    first_row = text.split("\n")[1]
    assert first_row.startswith("  ⚠  semi")
    assert first_row.split() == ["⚠", "semi", "Missing", "semicolon"]
    caret = " " * 10 + "^"
    assert f"\n  {location}:1:10\n  const a = 1\n  {caret}\n" in text
    assert f"\n  {location}:3:5\n" in text


def test_empty_results_print_only_success(make_options) -> None:
    text = build_report([], make_options())

    assert text.strip() == "✔  Success!"
    assert "problem" not in text


def test_none_results_are_treated_as_empty(make_options) -> None:
    assert build_report(None, make_options()).strip() == "✔  Success!"


def test_gulp_success_has_no_extra_blank_line(make_options) -> None:
    assert build_report([], make_options(from_gulp=True)) == "\n✔  Success!"
    assert build_report([], make_options()) == "\n\n✔  Success!"


def test_fixed_file_and_fixable_summary(make_options) -> None:
    results = [
        {
            "filePath": "lib/fixed.js",
            "messages": [],
            "fixableErrorCount": 2,
            "fixableWarningCount": 1,
            "output": "fixed source",
        }
    ]

    rendered = render_report(results, make_options())

    assert "Fixed 1 file" in rendered.text
    assert "3 problems (2 errors, 1 warning) fixable" in rendered.text
    assert rendered.totals.fixed_files == 1
    assert rendered.totals.fixable == 3


def test_output_key_counts_as_fixed_even_when_null(make_options) -> None:
    results = [{"filePath": "a.js", "messages": [], "output": None}, {"filePath": "b.js", "messages": []}]

    rendered = render_report(results, make_options())

    assert rendered.totals.fixed_files == 1
    assert "Fixed 1 file" in rendered.text


def test_filter_excludes_entries_but_not_fixable_counts(make_options, two_message_results) -> None:
    unfiltered = render_report(two_message_results, make_options())
    filtered = render_report(two_message_results, make_options(filter_rule="semi"))

    assert filtered.totals.errors == 0
    assert filtered.totals.warnings == 1
    assert filtered.totals.fixable == unfiltered.totals.fixable == 1
    assert "1 problem (0 errors, 1 warning)" in filtered.text
    assert "never used" not in filtered.text
    assert "Errors:" not in filtered.text


def test_filter_matching_nothing_reports_success(make_options, two_message_results) -> None:
    rendered = render_report(two_message_results, make_options(filter_rule="eqeqeq"))

    assert rendered.totals.total == 0
    assert "Success!" in rendered.text
    assert "1 problem (0 errors, 1 warning) fixable" in rendered.text


def test_fatal_and_unknown_severities_are_classified(make_options) -> None:
    results = [
        {
            "filePath": "a.js",
            "messages": [
                {"message": "Parsing error: Unexpected token", "severity": 1, "fatal": True},
                {"ruleId": "odd", "message": "strange", "severity": 7},
                {"ruleId": "odd", "message": "stranger", "severity": "high"},
            ],
        }
    ]

    rendered = render_report(results, make_options())

    assert rendered.totals.errors == 1
    assert rendered.totals.warnings == 2
    assert rendered.error_counts == {"": 1}
    assert rendered.warning_counts == {"odd": 2}


def test_aggregate_counts_sorted_descending(make_options) -> None:
    messages = [{"ruleId": "semi", "severity": 2, "message": "m"}] + [
        {"ruleId": "no-undef", "severity": 2, "message": "m"} for _ in range(3)
    ]
    text = build_report([{"filePath": "a.js", "messages": messages}], make_options(no_link_rules=True))

    assert "Errors:\n  3  no-undef\n  1  semi" in text


def test_counts_round_trip_through_styled_output(make_options, two_message_results) -> None:
    rendered = render_report(two_message_results, make_options(color=True))

    assert "\x1b[" in rendered.text
    match = _SUMMARY_RE.search(strip_ansi(rendered.text))
    assert match is not None
    total, errors, warnings = (int(group) for group in match.groups())
    assert (total, errors, warnings) == (2, 1, 1)
    assert errors + warnings == total == rendered.totals.total


def test_summary_colour_follows_errors(make_options) -> None:
    warning_only = [{"filePath": "a.js", "messages": [{"ruleId": "semi", "severity": 1, "message": "m"}]}]
    with_error = [{"filePath": "a.js", "messages": [{"ruleId": "semi", "severity": 2, "message": "m"}]}]

    assert "\x1b[1;33m✘  1 problem" in build_report(warning_only, make_options(color=True))
    assert "\x1b[1;31m✘  1 problem" in build_report(with_error, make_options(color=True))


def test_no_gray_removes_dimmed_styles(make_options, two_message_results) -> None:
    dimmed = build_report(two_message_results, make_options(color=True))
    plain = build_report(two_message_results, make_options(color=True, no_gray=True))

    assert "\x1b[90m" in dimmed
    assert "\x1b[90m" not in plain


def test_terminal_hint_prefix(make_options, tmp_path: Path) -> None:
    text = build_report([], make_options(terminal_hint=True))

    assert text.startswith(f"\x1b]1337;CurrentDir={tmp_path}\x07")
    assert text.endswith("✔  Success!")


def test_editor_links_are_added_below_location(make_options, tmp_path: Path) -> None:
    results = [{"filePath": str(tmp_path / "a b.js"), "messages": [{"ruleId": "semi", "severity": 1, "line": 2, "column": 4}]}]

    text = build_report(results, make_options(editor_scheme="editor://open?file={file}&line={line}&col={column}"))

    assert "\n  a b.js:2:4\n  editor://open?file=a%20b.js&line=2&col=4\n" in text


def test_rule_links_in_rows(make_options, two_message_results) -> None:
    text = build_report(two_message_results, make_options())

    assert "⚠  https://eslint.org/docs/rules/semi" in text
    assert "✘  https://eslint.org/docs/rules/no-unused-vars" in text


def test_collect_entries_accumulates_fixable_totals(make_options, tmp_path: Path) -> None:
    results = [
        FileResult(file_path="a.js", fixable_error_count=1, fixable_warning_count=2),
        {"filePath": "b.js", "messages": None, "fixableErrorCount": None, "fixableWarningCount": 4},
        "not a result",
    ]

    entries, totals = collect_entries(results, make_options())

    assert entries == []
    assert totals.fixable_errors == 1
    assert totals.fixable_warnings == 6


def test_display_path_modes(make_options, tmp_path: Path) -> None:
    target = tmp_path / "src" / "app.js"

    assert display_path(str(target), make_options()) == os.path.join("src", "app.js")
    assert display_path("src/app.js", make_options(absolute_paths=True)) == str(target)
    assert display_path(str(target), make_options(absolute_paths=True)) == str(target)


def test_sort_puts_warnings_before_errors() -> None:
    entries = [_entry("a.js", severity=2), _entry("b.js", severity=1), _entry("a.js", severity=1)]

    ordered = sort_entries(entries, group_by_issue=False)

    assert [(entry.severity, entry.file_path) for entry in ordered] == [(1, "a.js"), (1, "b.js"), (2, "a.js")]


def test_sort_orders_by_path_then_line_then_column() -> None:
    entries = [
        _entry("b.js", line=1, column=1),
        _entry("a.js", line=2, column=1),
        _entry("a.js", line=1, column=9),
        _entry("a.js", line=1, column=2),
    ]

    ordered = sort_entries(entries, group_by_issue=False)

    assert [(entry.file_path, entry.line, entry.column) for entry in ordered] == [
        ("a.js", 1, 2),
        ("a.js", 1, 9),
        ("a.js", 2, 1),
        ("b.js", 1, 1),
    ]


def test_sort_compares_paths_case_insensitively() -> None:
    ordered = sort_entries([_entry("B.js"), _entry("a.js"), _entry("c.js")], group_by_issue=False)

    assert [entry.file_path for entry in ordered] == ["a.js", "B.js", "c.js"]


def test_sort_puts_lowercase_first_on_case_only_ties() -> None:
    ordered = sort_entries([_entry("A.js"), _entry("b.js"), _entry("a.js")], group_by_issue=False)

    assert [entry.file_path for entry in ordered] == ["a.js", "A.js", "b.js"]


def test_group_by_issue_keeps_rules_contiguous() -> None:
    entries = [
        _entry("a.js", rule="semi"),
        _entry("b.js", rule="eqeqeq"),
        _entry("c.js", rule="semi"),
        _entry("d.js", rule=None),
        _entry("e.js", rule="eqeqeq", severity=2),
    ]

    grouped = sort_entries(entries, group_by_issue=True)
    ungrouped = sort_entries(entries, group_by_issue=False)

    assert [entry.rule_id for entry in grouped] == [None, "eqeqeq", "semi", "semi", "eqeqeq"]
    assert [entry.file_path for entry in ungrouped] == ["a.js", "b.js", "c.js", "d.js", "e.js"]


def test_sort_is_stable_for_identical_keys() -> None:
    first = _entry("a.js", text="first")
    second = _entry("a.js", text="second")

    ordered = sort_entries([first, second], group_by_issue=True)

    assert [entry.message.message for entry in ordered] == ["first", "second"]


def test_caret_pointer_reproduces_tabs() -> None:
    assert caret_pointer("\tfoo bar", 5) == "\t    ^"
    assert caret_pointer("ab", 4) == "    ^"
    assert caret_pointer("abc", 0) == "^"


def test_caret_pointer_skips_missing_or_long_source() -> None:
    assert caret_pointer(None, 3) is None
    assert caret_pointer("x" * 1000, 3) is None
    assert caret_pointer("x" * 999, 0) == "^"


def test_long_source_is_not_printed(make_options) -> None:
    source = "y" * 1200
    results = [{"filePath": "a.js", "messages": [{"ruleId": "max-len", "severity": 1, "column": 3, "source": source}]}]

    text = build_report(results, make_options())

    assert source not in text
    assert "^" not in text


def test_strip_trailing_period_only_removes_one() -> None:
    assert strip_trailing_period("Missing semicolon.") == "Missing semicolon"
    assert strip_trailing_period("Wait...") == "Wait.."
    assert strip_trailing_period("No period") == "No period"


def test_non_finite_numbers_do_not_break_the_report(make_options) -> None:
    results = [
        {"filePath": "a.js", "messages": [], "fixableErrorCount": float("inf")},
        {"filePath": "b.js", "messages": [{"ruleId": "semi", "severity": 1, "line": float("inf"), "column": float("nan")}]},
    ]

    rendered = render_report(results, make_options(no_link_rules=True))

    assert rendered.totals.fixable == 0
    assert "b.js:0:0" in rendered.text
