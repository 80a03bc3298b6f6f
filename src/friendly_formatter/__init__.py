# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Friendly, colourised terminal reports for ESLint-style lint results."""

from .api import format_results
from .config import FormatOptions
from .config_loader import load_format_options
from .errors import ConfigError, FormatterError, ResultsLoadError
from .loader import parse_results, read_results
from .models import DiagnosticMessage, EditInfo, FileResult
from .reporting import RenderedReport, ReportTotals, build_report, render_report
from .severity import Severity

__all__ = [
    "ConfigError",
    "DiagnosticMessage",
    "EditInfo",
    "FileResult",
    "FormatOptions",
    "FormatterError",
    "RenderedReport",
    "ReportTotals",
    "ResultsLoadError",
    "Severity",
    "build_report",
    "format_results",
    "load_format_options",
    "parse_results",
    "read_results",
    "render_report",
]
