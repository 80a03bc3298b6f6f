# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the friendly lint report formatter."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigError

ENV_NO_GRAY: Final[str] = "EFF_NO_GRAY"
ENV_EDITOR_SCHEME: Final[str] = "EFF_EDITOR_SCHEME"
ENV_NO_LINK_RULES: Final[str] = "EFF_NO_LINK_RULES"
ENV_ABSOLUTE_PATHS: Final[str] = "EFF_ABSOLUTE_PATHS"
ENV_FORCE_ITERM_HINT: Final[str] = "FORCE_ITERM_HINT"
ENV_CI: Final[str] = "CI"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
ENV_FORCE_COLOR: Final[str] = "FORCE_COLOR"

ARG_BY_ISSUE: Final[str] = "--eff-by-issue"
ARG_FILTER: Final[str] = "--eff-filter"
ARG_ABSOLUTE_PATHS: Final[str] = "--eff-absolute-paths"

RULE_DOCS_URL: Final[str] = "https://eslint.org/docs/rules/"
RULE_SEARCH_URL: Final[str] = "https://google.com/#q="


class FormatOptions(BaseModel):
    """Options controlling how a lint report is sorted, filtered, and styled."""

    model_config = ConfigDict(validate_assignment=True)

    group_by_issue: bool = False
    filter_rule: str | None = None
    absolute_paths: bool = False
    no_gray: bool = False
    no_link_rules: bool = False
    editor_scheme: str | None = None
    terminal_hint: bool = False
    from_gulp: bool = False
    color: bool = True
    cwd: Path = Field(default_factory=Path.cwd)

    @field_validator("filter_rule", "editor_scheme", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        """Treat empty strings as an unset option."""
        if isinstance(value, str) and not value:
            return None
        return value


__all__ = [
    "ARG_ABSOLUTE_PATHS",
    "ARG_BY_ISSUE",
    "ARG_FILTER",
    "ConfigError",
    "ENV_ABSOLUTE_PATHS",
    "ENV_CI",
    "ENV_EDITOR_SCHEME",
    "ENV_FORCE_COLOR",
    "ENV_FORCE_ITERM_HINT",
    "ENV_NO_COLOR",
    "ENV_NO_GRAY",
    "ENV_NO_LINK_RULES",
    "FormatOptions",
    "RULE_DOCS_URL",
    "RULE_SEARCH_URL",
]
