"""Text helpers for building fixed-width table output."""

from __future__ import annotations

from typing import List, Sequence

from rich.cells import cell_len

ELLIPSIS = "..."

_CONTROL_WHITESPACE = str.maketrans({"\t": " ", "\r": " ", "\n": " "})


def clean_cell(text: str) -> str:
    """Replace characters that would break a tab-separated line."""
    return text.translate(_CONTROL_WHITESPACE)


def ellipsize(text: str, max_chars: int) -> str:
    """Shorten ``text`` to at most ``max_chars`` characters plus an ellipsis.

    The cut happens at the last space inside the first ``max_chars``
    characters so words are not split. Text without a space there is cut at
    exactly ``max_chars``. Lengths are counted in code points.
    """
    if len(text) <= max_chars:
        return text

    # Already an excerpt of this budget.
    if text.endswith(ELLIPSIS) and len(text) <= max_chars + len(ELLIPSIS):
        return text

    taken = text[:max_chars]
    pos = taken.rfind(" ")
    if pos != -1:
        taken = taken[:pos].rstrip()
    return taken + ELLIPSIS


def align_columns(rows: Sequence[Sequence[str]], *, padding: int = 2) -> List[str]:
    """Pad cells so every column lines up across all rows.

    Each column but the last is padded to its widest cell plus ``padding``
    spaces. Widths are measured in terminal cells, so wide characters count
    double.
    """
    if not rows:
        return []

    column_count = max(len(row) for row in rows)
    widths = [0] * column_count
    for row in rows:
        for index, cell in enumerate(row[:-1]):
            widths[index] = max(widths[index], cell_len(cell))

    lines: List[str] = []
    for row in rows:
        parts = []
        for index, cell in enumerate(row):
            if index == len(row) - 1:
                parts.append(cell)
            else:
                parts.append(cell + " " * (widths[index] + padding - cell_len(cell)))
        lines.append("".join(parts).rstrip(" "))
    return lines
