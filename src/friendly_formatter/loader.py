# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load ESLint-compatible JSON result documents."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Final, TextIO

from .errors import ResultsLoadError
from .models import FileResult, coerce_file_result

LOGGER = logging.getLogger(__name__)

STDIN_MARKER: Final[str] = "-"


def parse_results(text: str, *, origin: str = "<input>") -> list[FileResult]:
    """Decode a JSON array of per-file results.

    Args:
        text: JSON document produced by the analysis engine.
        origin: Label used in error messages and logs.

    Returns:
        list[FileResult]: Validated results; non-object array items are skipped.

    Raises:
        ResultsLoadError: If the document is not valid JSON or not an array.
    """

    if not text.strip():
        return []
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResultsLoadError(f"{origin}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    if not isinstance(payload, list):
        raise ResultsLoadError(f"{origin}: expected a JSON array of file results")
    results: list[FileResult] = []
    for index, item in enumerate(payload):
        result = coerce_file_result(item) if isinstance(item, Mapping) else None
        if result is None:
            LOGGER.warning("%s: skipping result #%d, expected an object", origin, index)
            continue
        results.append(result)
    return results


def read_results(paths: Iterable[Path | str] = (), *, stdin: TextIO | None = None) -> list[FileResult]:
    """Read and concatenate results from files, or standard input.

    Args:
        paths: Result files in the order they should be reported; ``-``
            denotes standard input. Standard input is read when empty.
        stdin: Stream used for ``-``; defaults to :data:`sys.stdin`.

    Returns:
        list[FileResult]: Results from every source in argument order.

    Raises:
        ResultsLoadError: If a file cannot be read or decoded.
    """

    stream = sys.stdin if stdin is None else stdin
    targets = [str(path) for path in paths] or [STDIN_MARKER]
    results: list[FileResult] = []
    for target in targets:
        if target == STDIN_MARKER:
            results.extend(parse_results(stream.read(), origin="<stdin>"))
            continue
        try:
            text = Path(target).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResultsLoadError(f"{target}: cannot read results ({exc})") from exc
        results.extend(parse_results(text, origin=target))
    LOGGER.debug("Loaded %d file result(s) from %d source(s)", len(results), len(targets))
    return results


__all__ = ["STDIN_MARKER", "parse_results", "read_results"]
