#!/usr/bin/env python3
# exword/ui/static/table.py
from __future__ import annotations

from typing import List, Optional, Sequence

from ..utils import print_line, strip_ansi


def _column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    """Compute visual widths ignoring ANSI sequences."""
    widths: List[int] = []
    for row in rows:
        for col_idx, cell in enumerate(row):
            cell_length = len(strip_ansi(cell))
            if col_idx >= len(widths):
                widths.append(cell_length)
            else:
                widths[col_idx] = max(widths[col_idx], cell_length)
    return widths


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    border: bool = True,
    separator: str = "|",
) -> str:
    """
    Return an ASCII table string (ANSI-safe width calculation).

    With ``border=False`` the outer rules and edge separators are dropped,
    which gives plain aligned columns (used for help listings).
    """
    str_rows = [[str(cell) for cell in row] for row in rows]
    str_headers = [str(h) for h in headers] if headers is not None else None
    widths = _column_widths(([str_headers] if str_headers else []) + str_rows)
    pad = " " * padding

    def render_row(row: Sequence[str]) -> str:
        cells = []
        for i, cell in enumerate(row):
            fill = " " * (widths[i] - len(strip_ansi(cell)))
            cells.append(f"{pad}{cell}{fill}{pad}")
        if border:
            return separator + separator.join(cells) + separator
        return separator.join(cells).strip()

    lines: List[str] = []
    rule = "-" * (sum(widths) + padding * 2 * len(widths) + len(separator) * (len(widths) + 1))
    if border:
        lines.append(rule)
    if str_headers is not None:
        lines.append(render_row(str_headers))
        lines.append(render_row(["-" * w for w in widths]))
    lines.extend(render_row(row) for row in str_rows)
    if border:
        lines.append(rule)
    return "\n".join(lines)


def print_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    border: bool = True,
    separator: str = "|",
    file=None,
) -> None:
    """Print a formatted table to the given file (stdout by default)."""
    print_line(format_table(rows, headers, padding=padding,
               border=border, separator=separator), file=file)
