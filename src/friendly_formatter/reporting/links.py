# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule documentation and editor links embedded in the report."""

from __future__ import annotations

from typing import Final
from urllib.parse import quote

from rich.text import Text

from ..config import RULE_DOCS_URL, RULE_SEARCH_URL, FormatOptions
from .styles import EMPHASIS_STYLE, subtle, underline

# Characters ``encodeURIComponent`` leaves untouched on top of quote's defaults.
_URI_COMPONENT_SAFE: Final[str] = "!*'()"
_NAMESPACE_SEPARATOR: Final[str] = "/"


def encode_uri_component(value: str) -> str:
    """Percent-encode ``value`` for use inside a URL component."""

    return quote(value, safe=_URI_COMPONENT_SAFE)


def rule_base_url(rule_id: str) -> str:
    """Return the URL prefix the encoded ``rule_id`` is appended to.

    Plugin rules are namespaced with a slash and have no canonical page, so
    they fall back to a web search.
    """

    return RULE_SEARCH_URL if _NAMESPACE_SEPARATOR in rule_id else RULE_DOCS_URL


def resolve_rule_link(rule_id: str, options: FormatOptions) -> Text:
    """Return the styled rule reference shown in rows and aggregate tables.

    Args:
        rule_id: Rule identifier, or an empty string for unnamed diagnostics.
        options: Formatting options controlling link and gray output.

    Returns:
        Text: Underlined URL ending in the rule id, or the bare rule id when
        rule links are disabled.
    """

    if options.no_link_rules:
        return Text(rule_id, style=EMPHASIS_STYLE)
    link = subtle(rule_base_url(rule_id), options)
    link.append(encode_uri_component(rule_id), style=EMPHASIS_STYLE)
    return underline(link)


def resolve_file_link(path: str, line: int, column: int, options: FormatOptions) -> str | None:
    """Return an editor URL for a diagnostic location.

    Args:
        path: Display path of the file.
        line: One-based line number.
        column: One-based column number.
        options: Formatting options carrying the editor scheme template.

    Returns:
        str | None: Template with ``{file}``, ``{line}`` and ``{column}``
        substituted, or ``None`` when no editor scheme is configured.
    """

    scheme = options.editor_scheme
    if not scheme:
        return None
    return (
        scheme.replace("{file}", encode_uri_component(path))
        .replace("{line}", str(line))
        .replace("{column}", str(column))
    )


__all__ = [
    "encode_uri_component",
    "resolve_file_link",
    "resolve_rule_link",
    "rule_base_url",
]
