# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing lint results consumed by the formatter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .severity import Severity, classify

_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def _coerce_int(value: object, *, default: int = 0) -> int:
    """Return ``value`` as a non-negative integer, falling back to ``default``."""

    if isinstance(value, bool):
        return int(value)
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        # NaN raises ValueError; infinities raise OverflowError.
        return default
    return max(number, 0)


def _coerce_optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


class EditInfo(BaseModel):
    """Text replacement the analysis engine can apply automatically."""

    model_config = _MODEL_CONFIG

    range: tuple[int, int]
    text: str = ""


class DiagnosticMessage(BaseModel):
    """One finding reported at a specific file location."""

    model_config = _MODEL_CONFIG

    rule_id: str | None = None
    severity: int = Severity.WARNING.value
    message: str = ""
    line: int = 0
    column: int = 0
    end_line: int | None = None
    end_column: int | None = None
    source: str | None = None
    fatal: bool | None = None
    node_type: str | None = None
    fix: EditInfo | None = None

    @field_validator("rule_id", "source", "node_type", mode="before")
    @classmethod
    def _normalise_optional_text(cls, value: object) -> str | None:
        return _coerce_optional_str(value)

    @field_validator("message", mode="before")
    @classmethod
    def _normalise_message(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("severity", mode="before")
    @classmethod
    def _normalise_severity(cls, value: object) -> int:
        """Map unparsable severities to ``0`` so they classify as warnings."""
        return _coerce_int(value, default=0)

    @field_validator("line", "column", mode="before")
    @classmethod
    def _normalise_position(cls, value: object) -> int:
        return _coerce_int(value)

    @field_validator("end_line", "end_column", mode="before")
    @classmethod
    def _normalise_end_position(cls, value: object) -> int | None:
        return None if value is None else _coerce_int(value)

    @field_validator("fatal", mode="before")
    @classmethod
    def _normalise_fatal(cls, value: object) -> bool | None:
        return value if isinstance(value, bool) else None

    @field_validator("fix", mode="wrap")
    @classmethod
    def _lenient_fix(cls, value: object, handler: ValidatorFunctionWrapHandler) -> EditInfo | None:
        """Drop fix metadata that does not match the expected shape."""
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def classification(self) -> Severity:
        """Return the bucket (error or warning) this message is reported under."""
        return classify(self.severity, fatal=self.fatal)

    @property
    def is_fixable(self) -> bool:
        """Return ``True`` when the engine attached an automatic fix."""
        return self.fix is not None


class FileResult(BaseModel):
    """Lint results for a single file as produced by the analysis engine."""

    model_config = _MODEL_CONFIG

    file_path: str = ""
    messages: list[DiagnosticMessage] = Field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    output: str | None = None

    @field_validator("file_path", mode="before")
    @classmethod
    def _normalise_path(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("messages", mode="before")
    @classmethod
    def _normalise_messages(cls, value: object) -> list[Any]:
        """Treat missing message lists as empty and skip non-object entries."""
        if value is None or isinstance(value, (str, bytes, Mapping)):
            return []
        try:
            items = list(value)  # type: ignore[call-overload]
        except TypeError:
            return []
        return [item for item in items if isinstance(item, (Mapping, DiagnosticMessage))]

    @field_validator(
        "error_count",
        "warning_count",
        "fixable_error_count",
        "fixable_warning_count",
        mode="before",
    )
    @classmethod
    def _normalise_count(cls, value: object) -> int:
        return _coerce_int(value)

    @field_validator("output", mode="before")
    @classmethod
    def _normalise_output(cls, value: object) -> str | None:
        return _coerce_optional_str(value)

    @property
    def was_fixed(self) -> bool:
        """Return ``True`` when the engine supplied fixed output for the file."""
        return "output" in self.model_fields_set


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """A diagnostic message paired with the display path of its file."""

    file_path: str
    message: DiagnosticMessage

    @property
    def rule_id(self) -> str | None:
        return self.message.rule_id

    @property
    def severity(self) -> int:
        return self.message.severity

    @property
    def line(self) -> int:
        return self.message.line

    @property
    def column(self) -> int:
        return self.message.column


def coerce_file_result(value: FileResult | Mapping[str, Any]) -> FileResult | None:
    """Return ``value`` as a :class:`FileResult`, or ``None`` when it is unusable.

    Args:
        value: Model instance or raw mapping decoded from engine output.

    Returns:
        FileResult | None: Validated result, or ``None`` for non-object input.
    """

    if isinstance(value, FileResult):
        return value
    if not isinstance(value, Mapping):
        return None
    return FileResult.model_validate(value)


__all__ = [
    "DiagnosticMessage",
    "EditInfo",
    "FileResult",
    "ReportEntry",
    "coerce_file_result",
]
