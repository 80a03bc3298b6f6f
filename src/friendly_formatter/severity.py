# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Severity(IntEnum):
    """Numeric severity levels used by ESLint-compatible result payloads."""

    WARNING = 1
    ERROR = 2


ERROR_GLYPH: Final[str] = "✘"
WARNING_GLYPH: Final[str] = "⚠"


def classify(severity: int, *, fatal: bool | None = None) -> Severity:
    """Return the reporting bucket for a raw diagnostic severity.

    Fatal diagnostics and severity ``2`` count as errors; every other value,
    including malformed ones, is reported as a warning.

    Args:
        severity: Raw numeric severity supplied by the analysis engine.
        fatal: Optional fatal flag attached to parse failures.

    Returns:
        Severity: ``Severity.ERROR`` or ``Severity.WARNING``.
    """

    if fatal is True or severity == Severity.ERROR:
        return Severity.ERROR
    return Severity.WARNING


def severity_color(severity: Severity) -> str:
    """Return the rich colour name associated with a severity level."""

    return "red" if severity is Severity.ERROR else "yellow"


def severity_glyph(severity: Severity) -> str:
    """Return the glyph printed at the start of a diagnostic row."""

    return ERROR_GLYPH if severity is Severity.ERROR else WARNING_GLYPH


__all__ = [
    "ERROR_GLYPH",
    "WARNING_GLYPH",
    "Severity",
    "classify",
    "severity_color",
    "severity_glyph",
]
