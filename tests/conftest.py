"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmodel.core.enums import PieceColor, PieceType
from chessmodel.core.piece import Piece
from chessmodel.game.state import GameState


@pytest.fixture
def starting_state() -> GameState:
    """Fresh game state in the standard starting arrangement."""
    return GameState()


@pytest.fixture
def white_knight() -> Piece:
    return Piece("g", 1, PieceColor.WHITE, PieceType.KNIGHT)
