"""
Static evaluation: material count only.

Every piece on the board adds its value for the side we evaluate for, and subtracts it for the opponent.
No piece-square tables, mobility or king safety. A symmetric position (like the starting one) scores exactly 0.
"""

from src.chess.board import Board
from src.chess.pieces import Color


def evaluate(board: Board, perspective: Color) -> int:
    """Signed material balance, positive when `perspective` is ahead"""
    score = 0
    for row in board.grid:
        for piece in row:
            if piece is None:
                continue
            score += piece.value if piece.color == perspective else -piece.value
    return score
