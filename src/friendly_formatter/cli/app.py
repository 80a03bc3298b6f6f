# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point printing friendly reports for lint result files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import typer

from ..config_loader import load_format_options
from ..console import detect_tty
from ..errors import FormatterError
from ..loader import read_results
from ..logging import fail, warn
from ..reporting import render_report
from .typer_ext import PanelHelpCommand

EXIT_OK: Final[int] = 0
EXIT_PROBLEMS: Final[int] = 1
EXIT_FAILURE: Final[int] = 2

REPORT_PANEL: Final[str] = "Report options"
OUTPUT_PANEL: Final[str] = "Output options"

app = typer.Typer(
    name="friendly-formatter",
    help="Print a friendly, colourised report for ESLint-style JSON results.",
    add_completion=False,
    rich_markup_mode=None,
)


@app.command(cls=PanelHelpCommand)
def report(
    results: list[Path] | None = typer.Argument(
        None,
        metavar="[RESULTS]...",
        help="JSON result files to report; '-' or no argument reads standard input.",
    ),
    by_issue: bool = typer.Option(
        False,
        "--by-issue",
        help="Group diagnostics by rule within each severity.",
        rich_help_panel=REPORT_PANEL,
    ),
    filter_rule: str | None = typer.Option(
        None,
        "--filter",
        metavar="RULE",
        help="Only report diagnostics of RULE.",
        rich_help_panel=REPORT_PANEL,
    ),
    absolute_paths: bool | None = typer.Option(
        None,
        "--absolute-paths/--relative-paths",
        help="Print absolute file paths (defaults to EFF_ABSOLUTE_PATHS, then relative).",
        rich_help_panel=REPORT_PANEL,
    ),
    editor_scheme: str | None = typer.Option(
        None,
        "--editor-scheme",
        metavar="TEMPLATE",
        help="Editor URL template using {file}, {line} and {column}.",
        rich_help_panel=REPORT_PANEL,
    ),
    no_link_rules: bool = typer.Option(
        False,
        "--no-link-rules",
        help="Print rule ids without documentation links.",
        rich_help_panel=REPORT_PANEL,
    ),
    color: bool | None = typer.Option(
        None,
        "--color/--no-color",
        help="Force colour output on or off.",
        rich_help_panel=OUTPUT_PANEL,
    ),
    no_gray: bool = typer.Option(False, "--no-gray", help="Do not dim secondary text.", rich_help_panel=OUTPUT_PANEL),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging on standard error.",
        rich_help_panel=OUTPUT_PANEL,
    ),
) -> None:
    """Render lint results and exit non-zero when errors are reported."""

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    interactive = detect_tty()
    try:
        options = load_format_options(
            argv=(),
            interactive=interactive,
            overrides={
                "group_by_issue": by_issue or None,
                "filter_rule": filter_rule,
                "absolute_paths": absolute_paths,
                "editor_scheme": editor_scheme,
                "color": color,
                "no_gray": no_gray or None,
                "no_link_rules": no_link_rules or None,
            },
        )
        loaded = read_results(results or ())
    except FormatterError as exc:
        fail(str(exc), use_emoji=interactive, use_color=interactive)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    rendered = render_report(loaded, options)
    typer.echo(rendered.text, color=options.color)
    if options.filter_rule and not rendered.totals.total and any(result.messages for result in loaded):
        warn(f"No diagnostics matched rule {options.filter_rule!r}", use_emoji=interactive, use_color=interactive)
    raise typer.Exit(code=EXIT_PROBLEMS if rendered.totals.errors else EXIT_OK)


def main() -> None:
    """Run the command-line application."""

    app()


__all__ = ["EXIT_FAILURE", "EXIT_OK", "EXIT_PROBLEMS", "OUTPUT_PANEL", "REPORT_PANEL", "app", "main", "report"]
