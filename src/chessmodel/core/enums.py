"""Core enumerations for the chess data model."""

from __future__ import annotations

from enum import Enum


class PieceColor(Enum):
    """Side color.

    Declaration order matters: starting pieces are generated white first.
    """

    WHITE = "white"
    BLACK = "black"

    @property
    def is_white(self) -> bool:
        return self is PieceColor.WHITE

    @property
    def is_black(self) -> bool:
        return self is PieceColor.BLACK

    @property
    def starting_row(self) -> int:
        """Back rank of this color (1 for white, 8 for black)."""
        return 1 if self.is_white else 8

    @property
    def direction(self) -> int:
        """Row increment pointing towards the opponent."""
        return 1 if self.is_white else -1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor.BLACK if self.is_white else PieceColor.WHITE

    @classmethod
    def values(cls) -> list[PieceColor]:
        return list(cls)

    def __str__(self) -> str:
        return self.value


class PieceType(Enum):
    """Chess piece types, in the order of the Unicode glyph block."""

    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"

    @classmethod
    def values(cls) -> list[PieceType]:
        return list(cls)

    def __str__(self) -> str:
        return self.value
