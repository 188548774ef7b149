"""Buffered column alignment for tabular output."""

import sys
from typing import Optional, Sequence, TextIO

import typer


class ColumnAligner:
    """Buffers rows of cells and writes them right-aligned on flush.

    Each row is a sequence of aligned cells followed by a free trailing
    cell that is written as-is. Column widths are computed over all rows
    buffered since the last flush, so one block lines up on its own.

    Example:
        >>> aligner = ColumnAligner()
        >>> aligner.add_row(["a ", "bbb "], "x")
        >>> aligner.add_row(["cc ", "d "], "y")
        >>> aligner.flush()
         a bbb x
        cc   d y
    """

    def __init__(
        self, stream: Optional[TextIO] = None, min_width: int = 3, padding: int = 0
    ):
        self.stream = stream
        self.min_width = min_width
        self.padding = padding
        self._rows: list[tuple[Sequence[str], str]] = []

    def __enter__(self) -> "ColumnAligner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()

    def add_row(self, cells: Sequence[str], tail: str = "") -> None:
        self._rows.append((list(cells), tail))

    def render(self) -> list[str]:
        """Return the aligned lines for the buffered rows."""
        widths: list[int] = []
        for cells, _ in self._rows:
            for index, cell in enumerate(cells):
                width = max(self.min_width, len(cell) + self.padding)
                if index == len(widths):
                    widths.append(width)
                elif width > widths[index]:
                    widths[index] = width

        return [
            "".join(cell.rjust(widths[i]) for i, cell in enumerate(cells)) + tail
            for cells, tail in self._rows
        ]

    def flush(self) -> None:
        """Write all buffered rows and start a new block."""
        if not self._rows:
            return
        stream = self.stream or sys.stdout
        for line in self.render():
            typer.echo(line, file=stream)
        self._rows = []
