"""
Check and checkmate detection.

Both work on whatever board they are handed. `is_checkmate()` tries moves on that board and restores it after every try,
so it must not run while anything else writes to the same board.
"""

import logging

from src.chess.board import Board
from src.chess.moves import all_moves
from src.chess.pieces import Color

_log = logging.getLogger(__name__)


def is_in_check(board: Board, color: Color) -> bool:
    """True if any of the opponent's generated moves lands on the square of your king"""
    king_square = board.locate_king(color)
    if king_square is None:
        # Without a self-check filter a king can get captured while searching. Nothing left to attack.
        _log.debug("No %s king on the board", color.name.lower())
        return False

    return any(
        move.to_square == king_square for move in all_moves(board, color.opponent)
    )


def is_checkmate(board: Board, color: Color) -> bool:
    """
    In check, and none of your moves gets you out of it.
    ----

    1. Not in check? Then it is not checkmate.
    2. Try every move (same order as the move generator) and test again if you are still in check.
    3. The first move that escapes the check ends the search.
    """
    if not is_in_check(board, color):
        return False

    for move in all_moves(board, color):
        with board.trial(move):
            still_in_check = is_in_check(board, color)
        if not still_in_check:
            return False
    return True
