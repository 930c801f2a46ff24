"""Core domain layer: pieces and coordinates with zero external dependencies.

Quick start::

    from chessmodel.core import Piece, PieceColor, PieceType

    knight = Piece("g", 1, PieceColor.WHITE, PieceType.KNIGHT)
    jumped = knight.move_relative(column_delta=-1, row_delta=2)
    print(jumped.position, jumped.to_unicode())
"""

from chessmodel.core.enums import PieceColor, PieceType
from chessmodel.core.piece import Piece
from chessmodel.core.types import (
    BOARD_SIZE,
    COLUMNS,
    ROWS,
    IndexPosition,
    NormalPosition,
    index_to_normal,
    is_on_board,
    normal_to_index,
    parse_square,
    relative_position,
    square_name,
)

__all__ = [
    # Enums
    "PieceColor",
    "PieceType",
    # Coordinates
    "BOARD_SIZE",
    "COLUMNS",
    "ROWS",
    "IndexPosition",
    "NormalPosition",
    "index_to_normal",
    "is_on_board",
    "normal_to_index",
    "parse_square",
    "relative_position",
    "square_name",
    # Domain objects
    "Piece",
]
