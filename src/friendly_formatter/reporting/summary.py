# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Summary lines and per-rule aggregate tables appended to the report."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rich.table import Table
from rich.text import Text

from ..config import FormatOptions
from ..console import renderable_lines
from ..severity import ERROR_GLYPH
from .links import resolve_rule_link
from .styles import FIX_GLYPH, INDENT, SUBTLE_STYLE, SUCCESS_GLYPH


@dataclass(frozen=True, slots=True)
class ReportTotals:
    """Counts accumulated while building a report."""

    errors: int = 0
    warnings: int = 0
    fixable_errors: int = 0
    fixable_warnings: int = 0
    fixed_files: int = 0

    @property
    def total(self) -> int:
        """Return the number of rendered problems."""
        return self.errors + self.warnings

    @property
    def fixable(self) -> int:
        """Return the number of problems the engine can fix automatically."""
        return self.fixable_errors + self.fixable_warnings


def pluralize(word: str, count: int) -> str:
    """Return ``word`` with an ``s`` appended unless ``count`` is one."""

    return word if count == 1 else f"{word}s"


def describe_counts(total: int, errors: int, warnings: int) -> str:
    """Return the ``N problems (E errors, W warnings)`` phrase."""

    return (
        f"{total} {pluralize('problem', total)} "
        f"({errors} {pluralize('error', errors)}, {warnings} {pluralize('warning', warnings)})"
    )


def problems_line(totals: ReportTotals) -> Text:
    """Return the bold headline counting every rendered problem."""

    color = "red" if totals.errors else "yellow"
    return Text(
        f"{ERROR_GLYPH}  {describe_counts(totals.total, totals.errors, totals.warnings)}",
        style=f"bold {color}",
    )


def fixable_line(totals: ReportTotals) -> Text:
    """Return the line announcing how many problems can be auto-fixed."""

    phrase = describe_counts(totals.fixable, totals.fixable_errors, totals.fixable_warnings)
    return Text(f"{FIX_GLYPH} {phrase} fixable with --fix", style="bold yellow")


def fixed_files_line(totals: ReportTotals) -> Text:
    """Return the line reporting files rewritten by the engine.

    The message is yellow when shown next to the problem summary and gray
    when it stands alone.
    """

    color = "yellow" if totals.total else SUBTLE_STYLE
    line = Text(f"{FIX_GLYPH} ", style="yellow")
    line.append(f"Fixed {totals.fixed_files} {pluralize('file', totals.fixed_files)}", style=color)
    return line


def success_line() -> Text:
    """Return the line printed when no problems were rendered."""

    line = Text(SUCCESS_GLYPH, style="green")
    line.append("  Success!", style=SUBTLE_STYLE)
    return line


def render_aggregate(counts: Mapping[str, int], title: str, color: str, options: FormatOptions) -> Text:
    """Render a titled table of occurrence counts per rule.

    Args:
        counts: Mapping of rule id (``""`` for unnamed diagnostics) to count.
        title: Heading displayed above the table.
        color: Rich colour applied to the heading.
        options: Formatting options controlling rule links.

    Returns:
        Text: Heading and table, preceded by a blank line.
    """

    table = Table(box=None, show_header=False, padding=(0, 1), pad_edge=False, expand=False)
    table.add_column(justify="right", no_wrap=True)
    table.add_column(justify="left", no_wrap=True)
    for rule_id, count in sorted(counts.items(), key=lambda item: item[1], reverse=True):
        table.add_row(Text(str(count)), resolve_rule_link(rule_id, options))
    block = Text("\n\n")
    block.append(f"{title}:", style=color)
    for line in renderable_lines(table):
        block.append("\n")
        block.append(INDENT)
        block.append_text(line)
    return block


__all__ = [
    "ReportTotals",
    "describe_counts",
    "fixable_line",
    "fixed_files_line",
    "pluralize",
    "problems_line",
    "render_aggregate",
    "success_line",
]
