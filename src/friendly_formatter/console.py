# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console helpers used to turn styled text into terminal strings."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Final

from rich.color import ColorSystem
from rich.console import Console, RenderableType
from rich.text import Text

UNBOUNDED_WIDTH: Final[int] = 10_000


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=1)
def _style_console() -> Console:
    """Return the console used to resolve style names into ANSI sequences."""

    return Console(
        color_system="standard",
        force_terminal=True,
        emoji=False,
        highlight=False,
    )


def render_ansi(text: Text, *, color: bool) -> str:
    """Return ``text`` as a string carrying ANSI styling codes.

    Segments are rendered directly rather than printed so that tabs and
    layout produced by the caller survive untouched.

    Args:
        text: Styled rich text to render.
        color: When ``False`` the plain text is returned without escapes.

    Returns:
        str: Rendered terminal string.
    """

    if not color:
        return text.plain
    console = _style_console()
    # Text.render drops the base style of span-free text; appending makes it a span.
    flattened = Text()
    flattened.append_text(text)
    parts: list[str] = []
    for segment in flattened.render(console, end=""):
        if segment.style:
            parts.append(segment.style.render(segment.text, color_system=ColorSystem.STANDARD))
        else:
            parts.append(segment.text)
    return "".join(parts)


def renderable_lines(renderable: RenderableType) -> list[Text]:
    """Lay out ``renderable`` and return its lines as styled text.

    Trailing padding is removed from every line. Layout width is unbounded,
    so callers must use ``no_wrap`` columns for long content such as URLs.
    """

    console = _style_console()
    options = console.options.update_width(UNBOUNDED_WIDTH)
    lines: list[Text] = []
    for segments in console.render_lines(renderable, options, pad=False):
        line = Text.assemble(*((segment.text, segment.style) for segment in segments))
        line.rstrip()
        lines.append(line)
    return lines


def strip_ansi(value: str) -> str:
    """Return ``value`` with ANSI styling sequences removed."""

    return Text.from_ansi(value).plain


__all__ = ["UNBOUNDED_WIDTH", "detect_tty", "render_ansi", "renderable_lines", "strip_ansi"]
