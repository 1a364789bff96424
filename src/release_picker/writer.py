"""Column-aligned terminal output that can be erased and redrawn in place.

TabWriter lines up tab-terminated cells the way an elastic tabstop writer
does, and ClearableLineWriter remembers how many physical terminal lines the
last batch of output took so the next frame can overwrite it.
"""

from __future__ import annotations

import math
import os
from contextlib import contextmanager
from typing import Iterator

from rich.cells import cell_len
from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

# Spaces added after the widest cell of every column.
PADDING = 2


def _get_terminal_width(default: int = 80) -> int:
    """Return terminal columns with a safe fallback."""
    try:
        cols = os.get_terminal_size().columns
        return cols if cols > 0 else default
    except OSError:
        return default


def physical_lines(line: str, width: int) -> int:
    """Number of terminal rows a line occupies once wrapped at ``width``."""
    if width <= 0:
        return 1
    return max(1, math.ceil(cell_len(line) / width))


class TabWriter:
    """Buffers tab-separated lines and aligns their columns on flush.

    Every tab terminates a cell. A column's width is the widest cell in the
    contiguous block of lines that have that column, plus ``padding``.
    Text after the last tab of a line is emitted as-is.
    """

    def __init__(self, padding: int = PADDING):
        self.padding = padding
        self._lines: list[tuple[str, str | None]] = []

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, line: str, style: str | None = None) -> None:
        self._lines.append((line, style))

    def _column_widths(self, rows: list[list[str]]) -> list[list[int]]:
        widths: list[list[int]] = [[] for _ in rows]
        column = 0
        while True:
            found = False
            start = None
            for i in range(len(rows) + 1):
                has_column = i < len(rows) and len(rows[i]) - 1 > column
                if has_column:
                    found = True
                    if start is None:
                        start = i
                elif start is not None:
                    block = rows[start:i]
                    width = max(cell_len(cells[column]) for cells in block) + self.padding
                    for j in range(start, i):
                        widths[j].append(width)
                    start = None
            if not found:
                return widths
            column += 1

    def flush(self) -> list[tuple[str, str | None]]:
        """Return the aligned lines with their styles and empty the buffer."""
        rows = [line.split("\t") for line, _ in self._lines]
        widths = self._column_widths(rows)
        aligned = []
        for cells, cell_widths, (_, style) in zip(rows, widths, self._lines):
            parts = [
                cell + " " * (width - cell_len(cell))
                for cell, width in zip(cells, cell_widths)
            ]
            parts.append(cells[-1])
            aligned.append(("".join(parts), style))
        self._lines = []
        return aligned


class ClearableLineWriter:
    """Writes aligned lines to a Rich console and can erase them again.

    The terminal width is sampled once, when the writer is created; a resize
    during a session makes the next clear() move the cursor by the wrong
    number of lines.

    Args:
        console: Console to write to.
        width: Terminal width in cells (sampled from the terminal if None).
    """

    def __init__(self, console: Console, width: int | None = None):
        self.console = console
        self.width = width or _get_terminal_width(default=console.width)
        self.lines = 0
        self._tabs = TabWriter()

    def writeln(self, line: str = "", style: str | None = None) -> None:
        """Buffer one line; tabs separate columns."""
        self._tabs.add(line, style)

    def flush(self) -> None:
        """Align and write buffered lines, counting the rows they take."""
        for text, style in self._tabs.flush():
            self.lines += physical_lines(text, self.width)
            self.console.print(Text(text, style=style or ""), soft_wrap=True)

    def clear(self) -> None:
        """Move the cursor back to where the last written lines started."""
        if self.lines == 0:
            return
        self.console.control(
            Control.move(0, -self.lines),
            Control(ControlType.CARRIAGE_RETURN),
        )
        self.lines = 0

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the terminal cursor, restoring it however the block exits."""
        self.console.show_cursor(False)
        try:
            yield
        finally:
            self.console.show_cursor(True)
