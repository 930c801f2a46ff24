"""Plain-text rendering of a board projection."""

from __future__ import annotations

from typing import Any

from chessmodel.core.piece import Piece
from chessmodel.core.types import COLUMNS, ROWS


def debug_board(
    board: list[list[Any]], empty: str = "#", with_coordinates: bool = False
) -> str:
    """Render a :meth:`GameState.generate_board` grid, row 8 at the top.

    Cells holding anything other than a :class:`Piece` are drawn as *empty*.
    """
    lines: list[str] = []
    for row_index in range(len(ROWS) - 1, -1, -1):
        cells = []
        for column_index in range(len(COLUMNS)):
            square = board[column_index][row_index]
            cells.append(square.to_unicode() if isinstance(square, Piece) else empty)
        line = " ".join(cells)
        if with_coordinates:
            line = f"{ROWS[row_index]} {line}"
        lines.append(line)

    if with_coordinates:
        lines.append("  " + " ".join(COLUMNS))
    return "\n".join(lines) + "\n"
