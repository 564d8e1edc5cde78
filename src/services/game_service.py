"""Orchestration of communication from API router to the game (and the reverse direction)."""

import logging
from typing import Optional, Self

from src.api.models import (
    GameResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveModel,
    MoveRequest,
)
from src.chess.game import Game
from src.chess.moves import Move
from src.chess.pieces import Color as PieceColor
from src.core.exceptions import GameStateError
from src.core.settings import EngineSettings
from src.core.shared_types import Color

_log = logging.getLogger(__name__)


class GameService:
    """Holds the single game session and lets the engine answer the human's moves."""

    def __init__(self, game: Game, settings: EngineSettings) -> None:
        self.game = game
        self.settings = settings
        self.automated_color = PieceColor[settings.automated_color.name]
        self.human_color = PieceColor[settings.human_color.name]

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> Self:
        return cls(Game(search_depth=settings.search_depth), settings)

    # -- API routes logic ---
    def get_state(self) -> GameResponse:
        """Current position. If the engine is to move (it plays White and opens the game), it moves first."""
        with self.game.exclusive():
            if self._engine_to_move():
                return self._automated_reply()
            return self._create_game_response()

    def play_move(self, request: MoveRequest) -> GameResponse:
        """
        Human move, then (if it is its turn and nobody got mated) the engine's reply.

        The game stays locked from the human move until the reply is on the board.
        Errors of the domain layer (invalid move, game over) propagate unchanged.
        """
        with self.game.exclusive():
            # 1. only the human's side can be moved through this route
            if not self.game.is_over and self.game.color_to_move != self.human_color:
                raise GameStateError(
                    f"It is {self.game.color_to_move.name.lower()}'s turn, the engine is still to move."
                )

            # 2. human move
            self.game.apply_move(
                request.from_row, request.from_col, request.to_row, request.to_col
            )

            # 3. engine reply
            if not self._engine_to_move():
                return self._create_game_response()
            return self._automated_reply()

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Generated destinations for the piece on the requested square (for highlighting)."""
        moves = self.game.moves_from(request.row, request.col)
        return LegalMovesResponse(
            row=request.row,
            col=request.col,
            moves=[self._to_move_model(move) for move in moves],
        )

    # -- Internal helpers --
    def _engine_to_move(self) -> bool:
        return not self.game.is_over and self.game.color_to_move == self.automated_color

    def _automated_reply(self) -> GameResponse:
        reply = self.game.choose_move(self.automated_color)
        if reply is None:
            _log.info("%s has no move left", self.automated_color.name.lower())
            return self._create_game_response(no_legal_move=True)

        self.game.apply_move(*reply.coordinates)
        return self._create_game_response(automated_move=reply)

    def _create_game_response(
        self, automated_move: Optional[Move] = None, no_legal_move: bool = False
    ) -> GameResponse:
        game = self.game
        return GameResponse(
            board=game.board.glyphs(),
            color_to_move=Color[game.color_to_move.name],
            status=game.status,
            status_color=Color[game.status_color.name] if game.status_color else None,
            last_move=self._to_move_model(game.last_move) if game.last_move else None,
            automated_move=(
                self._to_move_model(automated_move) if automated_move else None
            ),
            no_legal_move=no_legal_move,
        )

    @staticmethod
    def _to_move_model(move: Move) -> MoveModel:
        from_row, from_col, to_row, to_col = move.coordinates
        return MoveModel(from_row=from_row, from_col=from_col, to_row=to_row, to_col=to_col)
