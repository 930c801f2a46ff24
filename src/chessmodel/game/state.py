"""Game state: the owned collection of pieces and its board projection."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from chessmodel.core.enums import PieceColor, PieceType
from chessmodel.core.piece import Piece
from chessmodel.core.types import COLUMNS, ROWS, normal_to_index

_LOGGER = logging.getLogger(__name__)

# Back-rank pieces in generation order: rooks, knights, bishops, queen, king.
_BACK_RANK: tuple[tuple[PieceType, tuple[str, ...]], ...] = (
    (PieceType.ROOK, ("a", "h")),
    (PieceType.KNIGHT, ("b", "g")),
    (PieceType.BISHOP, ("c", "f")),
    (PieceType.QUEEN, ("d",)),
    (PieceType.KING, ("e",)),
)


def generate_starting_pieces() -> list[Piece]:
    """Standard 32-piece starting arrangement, white pieces first."""
    pieces: list[Piece] = []
    for color in PieceColor.values():
        row = color.starting_row
        for piece_type, columns in _BACK_RANK:
            pieces.extend(Piece(column, row, color, piece_type) for column in columns)

        pawn_row = row + color.direction
        pieces.extend(Piece(column, pawn_row, color, PieceType.PAWN) for column in COLUMNS)
    return pieces


class GameState:
    """All pieces of a game at one point in time.

    Distinct positions are not enforced; see :meth:`generate_board` for how
    overlapping pieces are projected.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: list[Piece] | None = None) -> None:
        self._pieces = pieces if pieces is not None else generate_starting_pieces()

    @property
    def pieces(self) -> list[Piece]:
        return self._pieces

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    # ── Board projection ─────────────────────────────────────────────────

    def generate_board(self, fill: Any = None) -> list[list[Any]]:
        """8x8 grid addressed as ``board[column_index][row_index]``.

        Every cell starts as *fill*; each piece then overwrites its own cell,
        so when two pieces share a square the later one wins.  Pieces off the
        board are left out.
        """
        board = [[fill for _ in ROWS] for _ in COLUMNS]

        for piece in self._pieces:
            i, j = normal_to_index(piece.column, piece.row)
            if i < 0 or j < 0:
                _LOGGER.warning("Skipping off-board piece %r", piece)
                continue
            previous = board[j][i]
            if isinstance(previous, Piece):
                _LOGGER.debug("%r hides %r on the board", piece, previous)
            board[j][i] = piece

        return board

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, column: str, row: int) -> Piece | None:
        """Piece shown on *column*/*row* by :meth:`generate_board`, if any."""
        column = column.lower()
        found: Piece | None = None
        for piece in self._pieces:
            if piece.column == column and piece.row == row:
                found = piece
        return found

    def pieces_of(
        self, color: PieceColor, piece_type: PieceType | None = None
    ) -> list[Piece]:
        """Pieces of *color*, optionally restricted to *piece_type*."""
        return [
            piece
            for piece in self._pieces
            if piece.color is color
            and (piece_type is None or piece.piece_type is piece_type)
        ]

    # ── Copying ──────────────────────────────────────────────────────────

    def deep_copy(self) -> GameState:
        """Independent state over freshly copied pieces."""
        return GameState([piece.deep_copy() for piece in self._pieces])

    def __deepcopy__(self, memo: dict[int, object]) -> GameState:
        return self.deep_copy()

    def __repr__(self) -> str:
        return f"GameState({len(self._pieces)} pieces)"
