"""The Game board: an 8x8 grid of optional pieces, plus the make/undo primitives the rules and search rely on"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.moves import Move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_SIZE, Square
from src.core.exceptions import GameStateError

Cell = Optional[Piece]
Grid = list[list[Cell]]

# Row 0 (Black's back rank) is written first, just like the 8th rank is in a FEN string
STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_LAYOUT = "/".join(["8"] * BOARD_SIZE)


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls([[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def initial(cls) -> Self:
        """The standard starting position"""
        return cls.from_layout(STARTING_LAYOUT)

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * row 0 holds the black pieces (lower case letters), starting with a rook in column 0
        * row 1 is filled with black pawns
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces
        """
        rows = layout.split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(
                f"Layout must describe {BOARD_SIZE} rows separated by '/'. Got: {layout!r}"
            )

        grid: Grid = []
        for layout_row in rows:
            cells: list[Cell] = []
            for character in layout_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    cells.append(Piece.from_symbol(character))
                else:
                    # A number denotes the amount of empty squares after each other
                    cells.extend([None] * int(character))
            if len(cells) != BOARD_SIZE:
                raise ValueError(
                    f"Layout row {layout_row!r} does not describe {BOARD_SIZE} squares."
                )
            grid.append(cells)
        return cls(grid)

    def to_layout(self) -> str:
        """Rows are separated by slashes, empty squares are counted."""
        return "/".join(self._row_to_layout(row) for row in self.grid)

    @staticmethod
    def _row_to_layout(row: list[Cell]) -> str:
        characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.to_symbol())

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    # --- ACCESS ---
    def cell_at(self, square: Square) -> Cell:
        """NOTE: no bounds check. Callers generating squares by offsets must check `is_within_bounds()` themselves."""
        return self.grid[square.row][square.col]

    def set_cell(self, square: Square, piece: Cell) -> None:
        self.grid[square.row][square.col] = piece

    def color_of(self, square: Square) -> Color:
        piece = self.cell_at(square)
        if piece is None:
            raise GameStateError(f"No piece on {square}, so it has no color.")
        return piece.color

    def copy(self) -> Self:
        """Pieces are immutable, so copying the rows is enough"""
        return type(self)([list(row) for row in self.grid])

    def locate_king(self, color: Color) -> Optional[Square]:
        """Row by row scan, first king of that color found"""
        king = Piece(PieceType.KING, color)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.grid[row][col] == king:
                    return Square(row, col)
        return None

    def glyphs(self) -> list[list[str]]:
        """Read-only projection for display: one glyph per square, empty string for an empty square."""
        return [[piece.glyph if piece else "" for piece in row] for row in self.grid]

    # --- MAKE / UNDO ---
    def make_move(self, move: Move) -> Cell:
        """Update the position on the board. Returns whatever stood on the target square (it gets overwritten)."""
        moving_piece = self.cell_at(move.from_square)
        captured = self.cell_at(move.to_square)
        self.set_cell(move.from_square, None)
        self.set_cell(move.to_square, moving_piece)
        return captured

    def undo_move(self, move: Move, captured: Cell) -> None:
        """Exact inverse of `make_move()`, given the piece it returned"""
        moving_piece = self.cell_at(move.to_square)
        self.set_cell(move.from_square, moving_piece)
        self.set_cell(move.to_square, captured)

    @contextmanager
    def trial(self, move: Move) -> Iterator[Cell]:
        """
        Try a move, and restore the board afterwards (also when the body raises).

        ex.
        with board.trial(move):
            still_in_check = is_in_check(board, color)
        """
        captured = self.make_move(move)
        try:
            yield captured
        finally:
            self.undo_move(move, captured)
