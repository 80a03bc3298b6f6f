# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: report builder, summaries, links, and table layout."""

from .builder import (
    RenderedReport,
    build_report,
    caret_pointer,
    collect_entries,
    display_path,
    render_report,
    sort_entries,
)
from .links import encode_uri_component, resolve_file_link, resolve_rule_link
from .summary import ReportTotals, pluralize, render_aggregate
from .table import TextTable

__all__ = [
    "RenderedReport",
    "ReportTotals",
    "TextTable",
    "build_report",
    "caret_pointer",
    "collect_entries",
    "display_path",
    "encode_uri_component",
    "pluralize",
    "render_aggregate",
    "render_report",
    "resolve_file_link",
    "resolve_rule_link",
    "sort_entries",
]
