"""Game layer: the collection of pieces forming a position.

Quick start::

    from chessmodel.game import GameState

    state = GameState()
    board = state.generate_board()
"""

from chessmodel.game.state import GameState, generate_starting_pieces

__all__ = [
    "GameState",
    "generate_starting_pieces",
]
