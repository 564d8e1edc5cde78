"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the move set for each piece type.

The order in which moves are generated matters: the search keeps the first of equally scored moves,
so rays/offsets are always walked in the same fixed order.

NOTE: There is no legality filter here. A move that leaves (or puts) your own king under attack is still generated.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_SIZE, Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def cell_at(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made. Captured pieces are simply overwritten."""

    from_square: Square
    to_square: Square

    @classmethod
    def from_coordinates(
        cls, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> Self:
        return cls(Square(from_row, from_col), Square(to_row, to_col))

    @property
    def coordinates(self) -> tuple[int, int, int, int]:
        """(from_row, from_col, to_row, to_col)"""
        return (
            self.from_square.row,
            self.from_square.col,
            self.to_square.row,
            self.to_square.col,
        )


# --- DIRECTIONS (order is observable, see module docstring) ---
ROOK_DIRECTIONS: list[Vector] = [(-1, 0), (0, -1), (1, 0), (0, 1)]
BISHOP_DIRECTIONS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = [
    (1, 0),
    (1, 1),
    (1, -1),
    (-1, 0),
    (-1, 1),
    (-1, -1),
    (0, 1),
    (0, -1),
]

# White moves UP the board (towards row 0), Black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: BOARD_SIZE - 2, Color.BLACK: 1}


def _color_on(square: Square, board: Board) -> Color:
    piece = board.cell_at(square)
    # for the type checker: movement rules are only ever called on occupied squares
    assert piece is not None
    return piece.color


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We walk along each direction until we hit another piece or the edge of the board.
    The first occupied square is only included if it holds an opponent's piece (a capture).
    """
    player_color = _color_on(square, board)

    moves: list[Move] = []
    for d_row, d_col in directions:
        target_square = square.offset(d_row, d_col)
        while target_square.is_within_bounds():
            target_piece = board.cell_at(target_square)
            if target_piece is not None:
                if target_piece.color != player_color:
                    moves.append(Move(square, target_square))
                break

            moves.append(Move(square, target_square))
            target_square = target_square.offset(d_row, d_col)
    return moves


def single_step_move(square: Square, board: Board, deltas: list[Vector]) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that jump a single step along a direction"""
    player_color = _color_on(square, board)

    moves: list[Move] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        target_piece = board.cell_at(target_square)
        if target_piece is None or target_piece.color != player_color:
            moves.append(Move(square, target_square))
    return moves


def candidate_pawn_moves(square: Square, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only.
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally (and only moves diagonally when taking)

    NOTE: No en passant and no promotion. A pawn on the final row simply has no moves.
    """
    player_color = _color_on(square, board)
    direction = PAWN_DIRECTION[player_color]

    moves: list[Move] = []
    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.cell_at(one_step) is None:
        moves.append(Move(square, one_step))

        two_steps = square.offset(2 * direction, 0)
        if (
            square.row == PAWN_START_ROW[player_color]
            and board.cell_at(two_steps) is None
        ):
            moves.append(Move(square, two_steps))

    for d_col in (-1, 1):
        target_square = square.offset(direction, d_col)
        if not target_square.is_within_bounds():
            continue
        target_piece = board.cell_at(target_square)
        if target_piece is not None and target_piece.color != player_color:
            moves.append(Move(square, target_square))
    return moves


def candidate_knight_moves(square: Square, board: Board) -> list[Move]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, BISHOP_DIRECTIONS)


def candidate_rook_moves(square: Square, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, ROOK_DIRECTIONS)


def candidate_queen_moves(square: Square, board: Board) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    horizontal_and_vertical_moves = candidate_rook_moves(square, board)
    diagonal_moves = candidate_bishop_moves(square, board)
    return horizontal_and_vertical_moves + diagonal_moves


def candidate_king_moves(square: Square, board: Board) -> list[Move]:
    """The king can move by a single square at the time. No castling."""
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def candidate_moves(square: Square, board: Board) -> list[Move]:
    """Dispatch to the movement rule of whatever piece stands on the square (empty square: no moves)."""
    piece = board.cell_at(square)
    if piece is None:
        return []
    return MOVEMENT_RULES[piece.type](square, board)


def all_moves(board: Board, color: Color) -> list[Move]:
    """Scan the board row by row, collecting the moves of every piece of the given color."""
    moves: list[Move] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            square = Square(row, col)
            piece = board.cell_at(square)
            if piece is not None and piece.color == color:
                moves.extend(MOVEMENT_RULES[piece.type](square, board))
    return moves


def is_valid_move(board: Board, move: Move) -> bool:
    """The destination must be one of the squares generated for the piece standing on the origin."""
    return move in candidate_moves(move.from_square, board)
