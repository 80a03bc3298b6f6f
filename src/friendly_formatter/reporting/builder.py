# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the friendly terminal report from per-file lint results."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from rich.text import Text

from ..config import FormatOptions
from ..console import render_ansi
from ..models import FileResult, ReportEntry, coerce_file_result
from ..severity import Severity, severity_color, severity_glyph
from .links import resolve_file_link, resolve_rule_link
from .styles import INDENT, subtle, underline
from .summary import (
    ReportTotals,
    fixable_line,
    fixed_files_line,
    problems_line,
    render_aggregate,
    success_line,
)
from .table import TextTable

LOGGER = logging.getLogger(__name__)

MAX_SOURCE_LENGTH: Final[int] = 1000
TERMINAL_HINT_TEMPLATE: Final[str] = "\x1b]1337;CurrentDir={cwd}\x07"

ResultInput = FileResult | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class RenderedReport:
    """Report text together with the counts it summarises."""

    text: str
    totals: ReportTotals
    error_counts: dict[str, int] = field(default_factory=dict)
    warning_counts: dict[str, int] = field(default_factory=dict)


def display_path(file_path: str, options: FormatOptions) -> str:
    """Return ``file_path`` as it should appear in the report.

    Args:
        file_path: Path reported by the analysis engine.
        options: Formatting options carrying the base directory and path mode.

    Returns:
        str: Absolute path when ``absolute_paths`` is set, otherwise the path
        relative to ``options.cwd``.
    """

    base = options.cwd
    absolute = os.path.normpath(base / Path(file_path))
    if options.absolute_paths:
        return absolute
    try:
        relative = os.path.relpath(absolute, base)
    except ValueError:
        # Different drives on Windows have no relative form.
        return absolute
    return "" if relative == os.curdir else relative


def collect_entries(
    results: Iterable[ResultInput] | None,
    options: FormatOptions,
) -> tuple[list[ReportEntry], ReportTotals]:
    """Flatten per-file results into report entries.

    Fixable and fixed-file counts are taken from every result, independent
    of any rule filter applied later.

    Args:
        results: Per-file results as models or raw mappings.
        options: Formatting options used to resolve display paths.

    Returns:
        tuple[list[ReportEntry], ReportTotals]: Entries in input order and the
        fixable/fixed totals.
    """

    entries: list[ReportEntry] = []
    fixable_errors = 0
    fixable_warnings = 0
    fixed_files = 0
    for raw in results or ():
        result = coerce_file_result(raw)
        if result is None:
            LOGGER.debug("Skipping non-object result entry of type %s", type(raw).__name__)
            continue
        fixable_errors += result.fixable_error_count
        fixable_warnings += result.fixable_warning_count
        if result.was_fixed:
            fixed_files += 1
        path = display_path(result.file_path, options)
        entries.extend(ReportEntry(file_path=path, message=message) for message in result.messages)
    totals = ReportTotals(
        fixable_errors=fixable_errors,
        fixable_warnings=fixable_warnings,
        fixed_files=fixed_files,
    )
    return entries, totals


def _path_sort_key(path: str) -> tuple[str, str]:
    """Compare paths case-insensitively first, like a locale-aware collator.

    Case-only ties put lowercase before uppercase.
    """

    return path.casefold(), path.swapcase()


def sort_key(entry: ReportEntry, *, group_by_issue: bool) -> tuple[Any, ...]:
    """Return the composite ordering key for ``entry``."""

    rule_key: tuple[bool, str] = (False, "")
    if group_by_issue and entry.rule_id is not None:
        rule_key = (True, entry.rule_id)
    return (entry.severity, rule_key, _path_sort_key(entry.file_path), entry.line, entry.column)


def sort_entries(entries: Iterable[ReportEntry], *, group_by_issue: bool) -> list[ReportEntry]:
    """Return ``entries`` in report order.

    Warnings precede errors; with ``group_by_issue`` entries sharing a rule
    are contiguous inside each severity block. Ties keep input order.
    """

    return sorted(entries, key=lambda entry: sort_key(entry, group_by_issue=group_by_issue))


def caret_pointer(source: str | None, column: int) -> str | None:
    """Return a marker line pointing at ``column`` of ``source``.

    Tabs in the source are reproduced so the caret lines up regardless of
    the terminal tab width.

    Args:
        source: Source line the diagnostic refers to.
        column: Column the caret should point at.

    Returns:
        str | None: Marker ending in ``^``, or ``None`` when the source is
        missing or too long to display.
    """

    if source is None or len(source) >= MAX_SOURCE_LENGTH:
        return None
    padding = "".join("\t" if source[index : index + 1] == "\t" else " " for index in range(column))
    return f"{padding}^"


def strip_trailing_period(message: str) -> str:
    """Return ``message`` without a single trailing full stop."""

    return message[:-1] if message.endswith(".") else message


def location_block(entry: ReportEntry, options: FormatOptions) -> list[Text]:
    """Return the indented lines printed beneath a diagnostic row."""

    line, column = entry.line, entry.column
    filename = subtle(f"{entry.file_path}:{line}:{column}", options)
    link = resolve_file_link(entry.file_path, line, column, options)
    lines = [Text()]
    if link is None:
        lines.append(Text.assemble(INDENT, underline(filename)))
    else:
        lines.append(Text.assemble(INDENT, filename))
        lines.append(Text.assemble(INDENT, underline(subtle(link, options))))
    source = entry.message.source
    pointer = caret_pointer(source, column)
    if source is not None and pointer is not None:
        lines.append(Text.assemble(INDENT, subtle(source, options)))
        lines.append(Text.assemble(INDENT, subtle(pointer, options)))
    lines.append(Text())
    return lines


def _rule_cell(entry: ReportEntry, severity: Severity, options: FormatOptions) -> Text:
    cell = Text(severity_glyph(severity), style=severity_color(severity))
    cell.append("  ")
    cell.append_text(resolve_rule_link(entry.rule_id or "", options))
    return cell


def render_report(
    results: Iterable[ResultInput] | None,
    options: FormatOptions | None = None,
) -> RenderedReport:
    """Build the report and return it with its totals.

    Args:
        results: Per-file results as models or raw mappings.
        options: Formatting options; defaults apply when omitted.

    Returns:
        RenderedReport: Rendered text plus error, warning and fixable counts.
    """

    opts = options or FormatOptions()
    entries, collected = collect_entries(results, opts)
    ordered = sort_entries(entries, group_by_issue=opts.group_by_issue)

    errors = 0
    warnings = 0
    error_counts: dict[str, int] = {}
    warning_counts: dict[str, int] = {}
    table = TextTable(align=("left", "left", "left", "left"))
    for entry in ordered:
        if opts.filter_rule and entry.rule_id != opts.filter_rule:
            continue
        severity = entry.message.classification
        rule_key = entry.rule_id or ""
        if severity is Severity.ERROR:
            errors += 1
            error_counts[rule_key] = error_counts.get(rule_key, 0) + 1
        else:
            warnings += 1
            warning_counts[rule_key] = warning_counts.get(rule_key, 0) + 1
        table.add_row(
            "",
            _rule_cell(entry, severity, opts),
            strip_trailing_period(entry.message.message),
            location_block(entry, opts),
        )

    totals = ReportTotals(
        errors=errors,
        warnings=warnings,
        fixable_errors=collected.fixable_errors,
        fixable_warnings=collected.fixable_warnings,
        fixed_files=collected.fixed_files,
    )
    LOGGER.debug(
        "Rendering %d of %d diagnostic(s): %d error(s), %d warning(s)",
        totals.total,
        len(ordered),
        errors,
        warnings,
    )

    document = Text("\n")
    document.append_text(table.render())
    if totals.total:
        document.append("\n\n")
        document.append_text(problems_line(totals))
    if totals.fixable:
        document.append("\n")
        document.append_text(fixable_line(totals))
    if totals.fixed_files:
        document.append("\n")
        document.append_text(fixed_files_line(totals))
        if opts.from_gulp:
            document.append("\n")
    if errors:
        document.append_text(render_aggregate(error_counts, "Errors", "red", opts))
    if warnings:
        document.append_text(render_aggregate(warning_counts, "Warnings", "yellow", opts))
    if not totals.total:
        if not opts.from_gulp:
            document.append("\n")
        document.append_text(success_line())

    text = render_ansi(document, color=opts.color)
    if opts.terminal_hint:
        text = TERMINAL_HINT_TEMPLATE.format(cwd=opts.cwd) + text
    return RenderedReport(
        text=text,
        totals=totals,
        error_counts=error_counts,
        warning_counts=warning_counts,
    )


def build_report(
    results: Iterable[ResultInput] | None,
    options: FormatOptions | None = None,
) -> str:
    """Return the formatted terminal report for ``results``.

    Args:
        results: Per-file results as models or raw mappings.
        options: Formatting options; defaults apply when omitted.

    Returns:
        str: Newline-delimited report carrying ANSI styling codes.
    """

    return render_report(results, options).text


__all__ = [
    "MAX_SOURCE_LENGTH",
    "RenderedReport",
    "TERMINAL_HINT_TEMPLATE",
    "build_report",
    "caret_pointer",
    "collect_entries",
    "display_path",
    "location_block",
    "render_report",
    "sort_entries",
    "sort_key",
    "strip_trailing_period",
]
