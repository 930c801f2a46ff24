"""Tests for the text renderer."""

from chessmodel.core.enums import PieceColor, PieceType
from chessmodel.core.piece import Piece
from chessmodel.game.state import GameState
from chessmodel.render import debug_board


class TestDebugBoard:
    def test_starting_position(self, starting_state: GameState) -> None:
        text = debug_board(starting_state.generate_board(None))
        lines = text.splitlines()
        assert len(lines) == 8
        assert all(lines)
        assert lines[0] == "♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[1] == "♟ ♟ ♟ ♟ ♟ ♟ ♟ ♟"
        assert lines[2] == "# # # # # # # #"
        assert lines[6] == "♙ ♙ ♙ ♙ ♙ ♙ ♙ ♙"
        assert lines[7] == "♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"
        assert text.endswith("\n")

    def test_white_king_once_on_e1(self, starting_state: GameState) -> None:
        text = debug_board(starting_state.generate_board())
        assert text.count("♔") == 1
        assert text.splitlines()[7].split(" ")[4] == "♔"

    def test_non_piece_cells_use_empty(self) -> None:
        state = GameState([Piece("a", 1, PieceColor.BLACK, PieceType.KING)])
        lines = debug_board(state.generate_board("fill"), empty=".").splitlines()
        assert lines[0] == ". . . . . . . ."
        assert lines[7] == "♚ . . . . . . ."

    def test_with_coordinates(self, starting_state: GameState) -> None:
        lines = debug_board(
            starting_state.generate_board(), with_coordinates=True
        ).splitlines()
        assert len(lines) == 9
        assert lines[0].startswith("8 ♜")
        assert lines[7].startswith("1 ♖")
        assert lines[8] == "  a b c d e f g h"
