"""Defines the types of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self == Color.WHITE else Color.WHITE


SYMBOL_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_SYMBOL: dict[PieceType, str] = {
    value: key for key, value in SYMBOL_TO_PIECE.items()
}

# Material value used by the evaluation. The king gets a huge value so losing it dominates everything else.
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}

# Glyphs handed to the presentation layer. Black gets the filled set.
GLYPHS: dict[Color, dict[PieceType, str]] = {
    Color.BLACK: {
        PieceType.ROOK: "♜",
        PieceType.KNIGHT: "♞",
        PieceType.BISHOP: "♝",
        PieceType.QUEEN: "♛",
        PieceType.KING: "♚",
        PieceType.PAWN: "♟",
    },
    Color.WHITE: {
        PieceType.ROOK: "♖",
        PieceType.KNIGHT: "♘",
        PieceType.BISHOP: "♗",
        PieceType.QUEEN: "♕",
        PieceType.KING: "♔",
        PieceType.PAWN: "♙",
    },
}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @property
    def value(self) -> int:
        return PIECE_VALUES[self.type]

    @property
    def glyph(self) -> str:
        return GLYPHS[self.color][self.type]

    @classmethod
    def from_symbol(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = SYMBOL_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_symbol(self) -> str:
        return (
            PIECE_TO_SYMBOL[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_SYMBOL[self.type]
        )
