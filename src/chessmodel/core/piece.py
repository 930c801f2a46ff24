"""Piece entity: fixed color/type identity with a mutable position."""

from __future__ import annotations

from chessmodel.core.enums import PieceColor, PieceType
from chessmodel.core.types import NormalPosition, relative_position

# U+2654..U+265F: white K Q R B N P, then black in the same order.
_UNICODE: dict[tuple[PieceColor, PieceType], str] = {
    (PieceColor.WHITE, PieceType.KING): "♔",
    (PieceColor.WHITE, PieceType.QUEEN): "♕",
    (PieceColor.WHITE, PieceType.ROOK): "♖",
    (PieceColor.WHITE, PieceType.BISHOP): "♗",
    (PieceColor.WHITE, PieceType.KNIGHT): "♘",
    (PieceColor.WHITE, PieceType.PAWN): "♙",
    (PieceColor.BLACK, PieceType.KING): "♚",
    (PieceColor.BLACK, PieceType.QUEEN): "♛",
    (PieceColor.BLACK, PieceType.ROOK): "♜",
    (PieceColor.BLACK, PieceType.BISHOP): "♝",
    (PieceColor.BLACK, PieceType.KNIGHT): "♞",
    (PieceColor.BLACK, PieceType.PAWN): "♟",
}


class Piece:
    """A chess piece standing on a square.

    Color and type never change; the position does, either in place
    (``move_self_*``) or on a fresh copy (``move_*``).  Positions are not
    validated, so a piece may be moved off the board.
    """

    __slots__ = ("_column", "_row", "_color", "_piece_type")

    def __init__(
        self, column: str, row: int, color: PieceColor, piece_type: PieceType
    ) -> None:
        self._column = column.lower()
        self._row = row
        self._color = color
        self._piece_type = piece_type

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def column(self) -> str:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    @property
    def position(self) -> NormalPosition:
        return NormalPosition(self._column, self._row)

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def is_white(self) -> bool:
        return self._color.is_white

    @property
    def is_black(self) -> bool:
        return self._color.is_black

    # ── Identity / copying ───────────────────────────────────────────────

    def equals(self, other: Piece | None) -> bool:
        """True iff *other* has the same position, color and type."""
        if other is None:
            return False
        if self is other:
            return True
        return (
            self._column == other._column
            and self._row == other._row
            and self._color is other._color
            and self._piece_type is other._piece_type
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.equals(other)

    # Mutable: equal pieces may stop being equal after a move.
    __hash__ = None  # type: ignore[assignment]

    def deep_copy(self) -> Piece:
        """Independent copy; the enum members are shared."""
        return Piece(self._column, self._row, self._color, self._piece_type)

    def __copy__(self) -> Piece:
        return self.deep_copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Piece:
        return self.deep_copy()

    # ── Movement ─────────────────────────────────────────────────────────

    def move_self_relative(self, column_delta: int = 0, row_delta: int = 0) -> None:
        """Shift this piece by a column/row increment."""
        column, row = relative_position(
            self._column, self._row, column_incr=column_delta, row_incr=row_delta
        )
        self.move_self_absolute(column, row)

    def move_self_absolute(self, column: str, row: int) -> None:
        """Place this piece on *column*/*row*."""
        self._column = column.lower()
        self._row = row

    def move_relative(self, column_delta: int = 0, row_delta: int = 0) -> Piece:
        """Return a copy of this piece shifted by a column/row increment."""
        moved = self.deep_copy()
        moved.move_self_relative(column_delta, row_delta)
        return moved

    def move_absolute(self, column: str, row: int) -> Piece:
        """Return a copy of this piece placed on *column*/*row*."""
        moved = self.deep_copy()
        moved.move_self_absolute(column, row)
        return moved

    # ── Serialisation ────────────────────────────────────────────────────

    def to_unicode(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self._piece_type)]

    def __repr__(self) -> str:
        return f"Piece({self._color} {self._piece_type} at {self._column}{self._row})"
