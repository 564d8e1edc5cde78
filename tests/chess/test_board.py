"""Unit tests for /src/chess/board.py"""

import pytest

from src.chess.board import EMPTY_LAYOUT, STARTING_LAYOUT, Board
from src.chess.moves import Move, all_moves
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_SIZE, Square
from src.core.exceptions import GameStateError

# a position with captures available for both sides
MIDDLE_GAME = "/".join(
    ["r1bqk2r", "ppp2ppp", "2n2n2", "3pp3", "1bPP4", "2N1PN2", "PP3PPP", "R1BQKB1R"]
)


# --- CONSTRUCTION ---
def test_initial_board() -> None:
    board = Board.initial()
    assert board.cell_at(Square(0, 0)) == Piece(PieceType.ROOK, Color.BLACK)
    assert board.cell_at(Square(0, 4)) == Piece(PieceType.KING, Color.BLACK)
    assert board.cell_at(Square(0, 3)) == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.cell_at(Square(7, 4)) == Piece(PieceType.KING, Color.WHITE)
    assert board.cell_at(Square(7, 3)) == Piece(PieceType.QUEEN, Color.WHITE)
    assert all(
        board.cell_at(Square(1, col)) == Piece(PieceType.PAWN, Color.BLACK)
        for col in range(BOARD_SIZE)
    )
    assert all(
        board.cell_at(Square(6, col)) == Piece(PieceType.PAWN, Color.WHITE)
        for col in range(BOARD_SIZE)
    )
    assert all(
        board.cell_at(Square(row, col)) is None
        for row in range(2, 6)
        for col in range(BOARD_SIZE)
    )


@pytest.mark.parametrize("layout", [STARTING_LAYOUT, EMPTY_LAYOUT, MIDDLE_GAME])
def test_layout_roundtrip(layout: str) -> None:
    assert Board.from_layout(layout).to_layout() == layout


@pytest.mark.parametrize(
    "layout",
    [
        "/".join(["8"] * 7),  # too few rows
        "/".join(["8"] * 7 + ["7"]),  # row too short
        "/".join(["8"] * 7 + ["ppppppppp"]),  # row too long
    ],
)
def test_invalid_layout(layout: str) -> None:
    with pytest.raises(ValueError):
        _ = Board.from_layout(layout)


# --- ACCESS ---
def test_set_cell_and_color_of() -> None:
    board = Board.empty()
    square = Square(4, 2)
    board.set_cell(square, Piece(PieceType.KNIGHT, Color.BLACK))
    assert board.color_of(square) == Color.BLACK
    board.set_cell(square, None)
    assert board.cell_at(square) is None


def test_color_of_empty_square() -> None:
    """Color is only defined for occupied squares"""
    with pytest.raises(GameStateError):
        _ = Board.empty().color_of(Square(3, 3))


def test_locate_king() -> None:
    board = Board.initial()
    assert board.locate_king(Color.WHITE) == Square(7, 4)
    assert board.locate_king(Color.BLACK) == Square(0, 4)
    assert Board.empty().locate_king(Color.WHITE) is None


def test_copy_is_independent() -> None:
    board = Board.initial()
    copied = board.copy()
    copied.set_cell(Square(6, 4), None)
    assert board.cell_at(Square(6, 4)) == Piece(PieceType.PAWN, Color.WHITE)
    assert copied.cell_at(Square(6, 4)) is None


def test_glyphs() -> None:
    glyphs = Board.initial().glyphs()
    assert glyphs[0] == ["♜", "♞", "♝", "♛", "♚", "♝", "♞", "♜"]
    assert glyphs[7] == ["♖", "♘", "♗", "♕", "♔", "♗", "♘", "♖"]
    assert glyphs[4] == [""] * BOARD_SIZE


# --- MAKE / UNDO ---
def test_make_move_overwrites_target() -> None:
    board = Board.from_layout(MIDDLE_GAME)
    # bishop on b4 (row 4, col 1) takes the knight on c3 (row 5, col 2)
    move = Move.from_coordinates(4, 1, 5, 2)
    captured = board.make_move(move)
    assert captured == Piece(PieceType.KNIGHT, Color.WHITE)
    assert board.cell_at(Square(4, 1)) is None
    assert board.cell_at(Square(5, 2)) == Piece(PieceType.BISHOP, Color.BLACK)


@pytest.mark.parametrize("layout", [STARTING_LAYOUT, MIDDLE_GAME])
@pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
def test_make_and_undo_roundtrip(layout: str, color: Color) -> None:
    """Undoing any generated move leaves no trace on the board."""
    board = Board.from_layout(layout)
    for move in all_moves(board, color):
        captured = board.make_move(move)
        board.undo_move(move, captured)
        assert board.to_layout() == layout


def test_trial_restores_board() -> None:
    board = Board.from_layout(MIDDLE_GAME)
    move = Move.from_coordinates(4, 1, 5, 2)
    with board.trial(move) as captured:
        assert captured == Piece(PieceType.KNIGHT, Color.WHITE)
        assert board.cell_at(Square(5, 2)) == Piece(PieceType.BISHOP, Color.BLACK)
    assert board.to_layout() == MIDDLE_GAME


def test_trial_restores_board_on_error() -> None:
    board = Board.from_layout(MIDDLE_GAME)
    move = Move.from_coordinates(4, 1, 5, 2)
    with pytest.raises(RuntimeError):
        with board.trial(move):
            raise RuntimeError("boom")
    assert board.to_layout() == MIDDLE_GAME
