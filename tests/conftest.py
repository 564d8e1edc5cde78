"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.game import Game, GameState
from src.chess.pieces import Color


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Call the inner function with a board layout (row 0 first) and the color to move."""

    def _create_game(
        layout: str, color_to_move: Color = Color.WHITE, search_depth: int = 0
    ) -> Game:
        state = GameState(Board.from_layout(layout), color_to_move)
        return Game(state, search_depth=search_depth)

    return _create_game
