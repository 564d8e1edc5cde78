"""
Fixed depth minimax search over material evaluation.

The side we search for is always the maximizing side, its opponent minimizes. Plain minimax only:
no alpha-beta, no move ordering, no transposition table, no clock.

Every node first asks whether EITHER side is checkmated (regardless of who is to move) and stops there if so.
A node where the side to move has no moves at all scores -inf/+inf (the identity of max/min), it is not
treated as stalemate or checkmate.

The search makes and undoes moves on its own copy of the board, so the caller's board is never touched.
"""

import logging
import math
from typing import Optional

from src.chess.board import Board
from src.chess.evaluate import evaluate
from src.chess.moves import Move, all_moves
from src.chess.pieces import Color
from src.chess.rules import is_checkmate

_log = logging.getLogger(__name__)

DEFAULT_DEPTH = 3


class Searcher:
    """Search on behalf of `maximizing_color`."""

    def __init__(self, maximizing_color: Color, depth: int = DEFAULT_DEPTH) -> None:
        if depth < 0:
            raise ValueError(f"Search depth cannot be negative. Got {depth}")
        self.maximizing_color = maximizing_color
        self.minimizing_color = maximizing_color.opponent
        self.depth = depth
        self.nodes = 0

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Try every move of the maximizing side (in generator order) and score the reply tree with minimax.

        The first move with the strictly greatest score wins; ties keep the earlier move.
        Returns None only if there are no moves at all.
        """
        self.nodes = 0
        work_board = board.copy()

        best_move: Optional[Move] = None
        best_value = -math.inf
        for move in all_moves(work_board, self.maximizing_color):
            with work_board.trial(move):
                value = self.minimax(work_board, self.depth, maximizing=False)
            # NOTE: `best_move is None` makes sure a move is returned even if every line scores -inf
            if best_move is None or value > best_value:
                best_value = value
                best_move = move

        _log.debug(
            "best move for %s: %s (score %s, %d nodes, depth %d)",
            self.maximizing_color.name.lower(),
            best_move.coordinates if best_move else None,
            best_value,
            self.nodes,
            self.depth,
        )
        return best_move

    def minimax(self, board: Board, depth: int, maximizing: bool) -> float:
        """Score of the position from the maximizing side's point of view."""
        self.nodes += 1
        if self._is_terminal(board, depth):
            return evaluate(board, self.maximizing_color)

        if maximizing:
            max_eval = -math.inf
            for move in all_moves(board, self.maximizing_color):
                with board.trial(move):
                    value = self.minimax(board, depth - 1, maximizing=False)
                max_eval = max(max_eval, value)
            return max_eval

        min_eval = math.inf
        for move in all_moves(board, self.minimizing_color):
            with board.trial(move):
                value = self.minimax(board, depth - 1, maximizing=True)
            min_eval = min(min_eval, value)
        return min_eval

    def _is_terminal(self, board: Board, depth: int) -> bool:
        """Depth exhausted, or one of the two sides got mated (both are checked at every node)."""
        return (
            depth == 0
            or is_checkmate(board, self.maximizing_color)
            or is_checkmate(board, self.minimizing_color)
        )


def get_best_move(
    board: Board, color: Color, depth: int = DEFAULT_DEPTH
) -> Optional[Move]:
    """Convenience wrapper: best move for `color` on `board`."""
    return Searcher(color, depth).get_best_move(board)
