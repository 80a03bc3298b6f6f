# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Entry point for host tools that hand lint results to the formatter."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .config_loader import load_format_options
from .models import FileResult
from .reporting import build_report


def format_results(results: Iterable[FileResult | Mapping[str, Any]] | None) -> str:
    """Format ``results`` using options read from the running process.

    The environment, ``sys.argv`` and terminal state are read once here and
    turned into explicit options; the report itself is built without touching
    global state.

    Args:
        results: Per-file lint results as models or decoded JSON mappings.

    Returns:
        str: Styled terminal report.
    """

    return build_report(results, load_format_options())


__all__ = ["format_results"]
