"""ASGI entrypoint: `uvicorn src.main:app`. Settings are read from CHESS_* environment variables."""

from src.api.app import create_app

app = create_app()
