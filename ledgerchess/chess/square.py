"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    """row 0 is White's back rank (rank 1), col 0 is the a-file."""

    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        col = ord(sq[0]) - ord("a")
        row = int(sq[1]) - 1
        return cls(row, col)

    @property
    def index(self) -> int:
        """Position of the square in row-major order: a1 = 0, b1 = 1, ..., h8 = 63"""
        return self.row * BOARD_SIZE + self.col

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square.from_index(index) for index in range(BOARD_SIZE * BOARD_SIZE)
)
