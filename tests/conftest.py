# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from friendly_formatter.config import FormatOptions

_FORMATTER_ENV_VARS = (
    "EFF_NO_GRAY",
    "EFF_EDITOR_SCHEME",
    "EFF_NO_LINK_RULES",
    "EFF_ABSOLUTE_PATHS",
    "FORCE_ITERM_HINT",
    "CI",
    "NO_COLOR",
    "FORCE_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_formatter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change formatter output."""
    for name in _FORMATTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_options(tmp_path: Path) -> Callable[..., FormatOptions]:
    """Return a factory for uncoloured options rooted at ``tmp_path``."""

    def factory(**overrides: Any) -> FormatOptions:
        values: dict[str, Any] = {"color": False, "cwd": tmp_path}
        values.update(overrides)
        return FormatOptions(**values)

    return factory


@pytest.fixture
def two_message_results(tmp_path: Path) -> list[dict[str, Any]]:
    """Return one file result holding an error and a warning."""
    return [
        {
            "filePath": str(tmp_path / "src" / "app.js"),
            "messages": [
                {
                    "ruleId": "no-unused-vars",
                    "severity": 2,
                    "message": "'x' is defined but never used.",
                    "line": 3,
                    "column": 5,
                },
                {
                    "ruleId": "semi",
                    "severity": 1,
                    "message": "Missing semicolon.",
                    "line": 1,
                    "column": 10,
                    "source": "const a = 1",
                },
            ],
            "fixableErrorCount": 0,
            "fixableWarningCount": 1,
        }
    ]
