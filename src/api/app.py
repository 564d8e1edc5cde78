"""
FastAPI application exposing the engine to a presentation layer.

Sync endpoints: FastAPI runs them in its thread pool. The Game lock serialises them, so a move can never land
in the middle of a search.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.models import GameResponse, LegalMovesRequest, LegalMovesResponse, MoveRequest
from src.core.exceptions import (
    GameError,
    GameStateError,
    InvalidMoveError,
    InvalidRequestError,
)
from src.core.settings import EngineSettings
from src.services.game_service import GameService

_log = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[GameError], int] = {
    InvalidRequestError: 400,
    InvalidMoveError: 400,
    GameStateError: 409,
}


def create_app(settings: Optional[EngineSettings] = None) -> FastAPI:
    settings = settings if settings is not None else EngineSettings.from_env()
    logging.basicConfig(level=settings.log_level)

    service = GameService.from_settings(settings)
    app = FastAPI(title="Chess variant engine")
    app.state.service = service

    @app.exception_handler(GameError)
    async def handle_game_error(request: Request, error: GameError) -> JSONResponse:
        status_code = ERROR_STATUS_CODES.get(type(error), 400)
        _log.info("%s rejected: %s", request.url.path, error)
        return JSONResponse(status_code=status_code, content={"detail": str(error)})

    @app.get("/api/game", response_model=GameResponse)
    def get_game() -> GameResponse:
        return service.get_state()

    @app.post("/api/move", response_model=GameResponse)
    def post_move(request: MoveRequest) -> GameResponse:
        return service.play_move(request)

    @app.post("/api/legal-moves", response_model=LegalMovesResponse)
    def post_legal_moves(request: LegalMovesRequest) -> LegalMovesResponse:
        return service.legal_moves(request)

    return app
