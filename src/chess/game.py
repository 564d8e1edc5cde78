"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything required to play a turn:
validate the move, update the board, flip the turn and report whether somebody is in check or got mated.

The board is shared by move application, checkmate probes and the search. A lock makes sure only one of these
runs at the time (the search itself works on a copy of the board). `exclusive()` holds that lock across several calls.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock
from typing import Iterator, Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, all_moves, candidate_moves, is_valid_move
from src.chess.pieces import Color
from src.chess.rules import is_checkmate, is_in_check
from src.chess.search import DEFAULT_DEPTH, Searcher
from src.chess.square import Square
from src.core.exceptions import GameStateError, InvalidMoveError
from src.core.shared_types import GameStatus

_log = logging.getLogger(__name__)


@dataclass
class GameState:
    board: Board
    color_to_move: Color

    @classmethod
    def initial(cls) -> Self:
        """Standard starting position, White to move"""
        return cls(Board.initial(), Color.WHITE)


@dataclass(frozen=True)
class MoveOutcome:
    """What happened after a move got applied. `status_color` is the side in check / mated (None when NORMAL)."""

    move: Move
    status: GameStatus
    status_color: Optional[Color] = None


class Game:
    def __init__(
        self, state: Optional[GameState] = None, search_depth: int = DEFAULT_DEPTH
    ) -> None:
        self.state = state if state is not None else GameState.initial()
        self.search_depth = search_depth
        self.status = GameStatus.NORMAL
        self.status_color: Optional[Color] = None
        self.last_move: Optional[Move] = None
        self._lock = RLock()

    # --- DOMAIN LAYER API CALLED BY SERVICE---
    @staticmethod
    def initial_state() -> GameState:
        return GameState.initial()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def color_to_move(self) -> Color:
        return self.state.color_to_move

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.CHECKMATE

    @property
    def winner(self) -> Optional[Color]:
        """Only defined after checkmate: the opponent of whoever got mated"""
        if not self.is_over or self.status_color is None:
            return None
        return self.status_color.opponent

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """Keep the game for a sequence of calls, e.g. a move, the search for the reply and the reply itself."""
        with self._lock:
            yield

    def apply_move(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. the game must still be going on
        2. there must be a piece of the side to move on the origin
        3. the destination must be generated by that piece's movement rule
        4. update the board, flip the turn
        5. update the game status (check / checkmate)

        Rejected moves raise before anything on the board changes.
        """
        with self._lock:
            if self.is_over:
                raise GameStateError(
                    f"Game is over. {self.status_color.name.lower() if self.status_color else ''} got mated."
                )

            move = Move.from_coordinates(from_row, from_col, to_row, to_col)
            self._assert_valid_move(move)

            self.board.make_move(move)
            mover = self.color_to_move
            self.state.color_to_move = mover.opponent
            self.last_move = move

            outcome = self._determine_outcome(move, mover)
            self.status = outcome.status
            self.status_color = outcome.status_color
            _log.debug(
                "%s played %s -> %s", mover.name.lower(), move.coordinates, outcome.status
            )
            if outcome.status == GameStatus.CHECKMATE and outcome.status_color:
                _log.info(
                    "Checkmate! %s wins", outcome.status_color.opponent.name.lower()
                )
            return outcome

    def choose_move(self, color: Color) -> Optional[Move]:
        """Automated side's decision. None if the color has no moves at all."""
        with self._lock:
            searcher = Searcher(color, self.search_depth)
            return searcher.get_best_move(self.board)

    def moves_from(self, row: int, col: int) -> list[Move]:
        """Generated moves of the piece on the given square (used to highlight targets)"""
        square = Square(row, col)
        if not square.is_within_bounds():
            raise InvalidMoveError(f"Square {(row, col)} is not on the board.")
        with self._lock:
            return candidate_moves(square, self.board)

    def has_moves(self, color: Color) -> bool:
        with self._lock:
            return len(all_moves(self.board, color)) > 0

    # -- PRIVATE HELPERS ---
    def _assert_valid_move(self, move: Move) -> None:
        if not (move.from_square.is_within_bounds() and move.to_square.is_within_bounds()):
            raise InvalidMoveError(f"Move {move.coordinates} leaves the board.")

        piece = self.board.cell_at(move.from_square)
        if piece is None:
            raise InvalidMoveError(f"No piece to move on {move.coordinates[:2]}.")

        if piece.color != self.color_to_move:
            raise InvalidMoveError(
                f"It is not your turn. Waiting for {self.color_to_move.name.lower()} to make a move first."
            )

        if not is_valid_move(self.board, move):
            raise InvalidMoveError(f"Move not allowed: {move.coordinates}")

    def _determine_outcome(self, move: Move, mover: Color) -> MoveOutcome:
        """
        Check the side that is to move next first (mate before check).
        If that side is fine, the mover may still have left their own king hanging (there is no self-check filter).
        """
        next_color = mover.opponent
        if is_checkmate(self.board, next_color):
            return MoveOutcome(move, GameStatus.CHECKMATE, next_color)
        if is_in_check(self.board, next_color):
            return MoveOutcome(move, GameStatus.CHECK, next_color)
        if is_in_check(self.board, mover):
            return MoveOutcome(move, GameStatus.CHECK, mover)
        return MoveOutcome(move, GameStatus.NORMAL)
