"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    NORMAL = "normal"
    CHECK = "check"
    CHECKMATE = "checkmate"


# --- Color mirrors the enum in src/chess/pieces.py, but as plain strings for the boundary (requests/responses, settings).
# --- NOTE Same name is used on purpose; the imports show which one is used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

