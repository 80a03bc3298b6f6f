# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the formatter adapters."""

from __future__ import annotations


class FormatterError(Exception):
    """Base class for errors raised outside the report builder."""


class ConfigError(FormatterError):
    """Raised when formatter options cannot be validated."""


class ResultsLoadError(FormatterError):
    """Raised when lint results cannot be read or decoded."""


__all__ = ["ConfigError", "FormatterError", "ResultsLoadError"]
