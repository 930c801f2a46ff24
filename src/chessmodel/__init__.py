"""Minimal chess data model: pieces, coordinates and game state."""

from chessmodel.core import Piece, PieceColor, PieceType
from chessmodel.game import GameState, generate_starting_pieces
from chessmodel.render import debug_board

__version__ = "0.1.0"

__all__ = [
    "GameState",
    "Piece",
    "PieceColor",
    "PieceType",
    "debug_board",
    "generate_starting_pieces",
]
