# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain-text help layout that honours Typer help panels."""

from __future__ import annotations

from typing import Final

from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand

ARGUMENTS_SECTION: Final[str] = "Arguments"
DEFAULT_SECTION: Final[str] = "Options"


def option_sort_name(param: Parameter) -> str:
    """Return the long option name ``param`` is listed under, without dashes."""

    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    return (long_names[0] if long_names else param.name or "").lstrip("-").lower()


def help_section(param: Parameter) -> str:
    """Return the help section ``param`` belongs to.

    Options declared with ``rich_help_panel`` are listed under that panel
    title; everything else, including ``--help``, falls into the default
    section.
    """

    if getattr(param, "param_type_name", "") == "argument":
        return ARGUMENTS_SECTION
    return getattr(param, "rich_help_panel", None) or DEFAULT_SECTION


class PanelHelpCommand(TyperCommand):
    """Command whose plain help groups options by panel, sorted by name.

    Sections appear in declaration order with arguments first and the
    default section last.
    """

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        sections: dict[str, list[tuple[str, tuple[str, str]]]] = {ARGUMENTS_SECTION: []}
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            sections.setdefault(help_section(param), []).append((option_sort_name(param), record))
        default = sections.pop(DEFAULT_SECTION, [])
        if default:
            sections[DEFAULT_SECTION] = default

        for title, entries in sections.items():
            if not entries:
                continue
            if title != ARGUMENTS_SECTION:
                entries = sorted(entries, key=lambda entry: entry[0])
            with formatter.section(title):
                formatter.write_dl([record for _, record in entries])


__all__ = ["ARGUMENTS_SECTION", "DEFAULT_SECTION", "PanelHelpCommand", "help_section", "option_sort_name"]
