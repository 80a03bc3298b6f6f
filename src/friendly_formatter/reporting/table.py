# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain-text table layout for styled report rows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final, Literal, TypeAlias

from rich.text import Text

Align: TypeAlias = Literal["left", "right"]
Cell: TypeAlias = Text | str | Sequence[Text | str]

COLUMN_SEPARATOR: Final[str] = "  "


def _as_lines(cell: Cell) -> tuple[Text, ...]:
    """Normalise a cell into the tuple of lines it occupies."""

    if isinstance(cell, Text):
        return (cell,)
    if isinstance(cell, str):
        return (Text(cell),)
    lines = tuple(item if isinstance(item, Text) else Text(item) for item in cell)
    return lines or (Text(),)


@dataclass(slots=True)
class TextTable:
    """Rows of cells laid out in aligned columns.

    Only the first line of each cell takes part in column alignment. Any
    further lines are emitted verbatim beneath the row, which lets a cell
    carry a multi-line block (such as a source excerpt) without widening the
    table. Widths are measured on the plain text, so styles never affect
    alignment.
    """

    align: tuple[Align, ...] = ()
    separator: str = COLUMN_SEPARATOR
    rows: list[tuple[tuple[Text, ...], ...]] = field(default_factory=list)

    def add_row(self, *cells: Cell) -> None:
        """Append a row built from ``cells``."""

        self.rows.append(tuple(_as_lines(cell) for cell in cells))

    def alignment(self, index: int) -> Align:
        """Return the alignment configured for column ``index``."""

        return self.align[index] if index < len(self.align) else "left"

    def column_widths(self) -> list[int]:
        """Return the display width of every column."""

        widths: list[int] = []
        for row in self.rows:
            for index, lines in enumerate(row):
                width = lines[0].cell_len
                if index == len(widths):
                    widths.append(width)
                elif width > widths[index]:
                    widths[index] = width
        return widths

    def render(self) -> Text:
        """Return the table as a single newline-joined text block."""

        widths = self.column_widths()
        rendered: list[Text] = []
        for row in self.rows:
            heads: list[Text] = []
            for index, lines in enumerate(row):
                head = lines[0].copy()
                gap = widths[index] - head.cell_len
                if gap > 0:
                    if self.alignment(index) == "right":
                        head.pad_left(gap)
                    else:
                        head.pad_right(gap)
                heads.append(head)
            line = Text(self.separator).join(heads)
            line.rstrip()
            rendered.append(line)
            for lines in row:
                rendered.extend(lines[1:])
        return Text("\n").join(rendered)


__all__ = ["Align", "COLUMN_SEPARATOR", "Cell", "TextTable"]
