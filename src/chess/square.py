"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Row 0 is Black's back rank, row 7 is White's back rank.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        """NOTE: the resulting square can lie off the board. Check with `is_within_bounds()` before using it."""
        return Square(self.row + d_row, self.col + d_col)

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)
