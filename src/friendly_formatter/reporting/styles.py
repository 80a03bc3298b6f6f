# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared rich styles for report output."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from ..config import FormatOptions

SUBTLE_STYLE: Final[str] = "bright_black"
EMPHASIS_STYLE: Final[str] = "white"
LINK_STYLE: Final[str] = "underline"
INDENT: Final[str] = "  "
FIX_GLYPH: Final[str] = "🔨"
SUCCESS_GLYPH: Final[str] = "✔"


def subtle(value: str, options: FormatOptions) -> Text:
    """Return ``value`` dimmed unless gray output is disabled."""

    if options.no_gray:
        return Text(value)
    return Text(value, style=SUBTLE_STYLE)


def underline(text: Text) -> Text:
    """Underline ``text`` in place and return it."""

    text.stylize(LINK_STYLE)
    return text


__all__ = [
    "EMPHASIS_STYLE",
    "FIX_GLYPH",
    "INDENT",
    "LINK_STYLE",
    "SUBTLE_STYLE",
    "SUCCESS_GLYPH",
    "subtle",
    "underline",
]
