"""Rainbow-coloured text and boxed tables for the terminal."""

from __future__ import annotations

import math
import sys
from typing import List, Sequence, Tuple

_FACTOR = 0.3


def _rgb(index: int) -> Tuple[int, int, int]:
    x = _FACTOR * index
    r, g, b = (int(math.sin(x + k * math.pi / 3) * 127 + 128) for k in (0, 2, 4))
    return r, g, b


def color_text(text: str) -> str:
    """Wrap each character of ``text`` in a 24-bit colour escape sequence."""
    pieces = []
    for index, char in enumerate(text):
        r, g, b = _rgb(index)
        pieces.append(f"\x1b[38;2;{r};{g};{b}m{char}\x1b[0m")
    return "".join(pieces)


def print_color(fmt: str, *args: object) -> str:
    """Format ``fmt`` with ``%`` by ``args``, print it coloured; return the output."""
    text = color_text(fmt % args if args else fmt)
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def format_table(rows: Sequence[Sequence[object]]) -> str:
    """Render rows of cells as a table boxed with ``+``, ``-`` and ``|``.

    Every row must have the same number of cells.
    """
    cells: List[List[str]] = [[str(cell) for cell in row] for row in rows]
    columns = len(cells[0]) if cells else 0
    if any(len(row) != columns for row in cells):
        raise ValueError("all rows must have the same number of cells")

    widths = [max(len(row[j]) for row in cells) for j in range(columns)]
    separator = "".join("+" + "-" * (width + 2) for width in widths) + "+\n"

    lines = []
    for row in cells:
        lines.append(separator)
        lines.append("".join(f"| {cell:<{w}} " for cell, w in zip(row, widths)) + "|\n")
    lines.append(separator)
    return "".join(lines)


def print_table(rows: Sequence[Sequence[object]]) -> str:
    """Print the table for ``rows`` and return it."""
    text = format_table(rows)
    sys.stdout.write(text)
    sys.stdout.flush()
    return text