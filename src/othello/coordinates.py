"""
Row/column address of a cell on the Othello board.

Shared by the board, the robot strategies and the service, so it lives on its own.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidPositionError

# Othello is always played on 8x8. Other sizes are out of scope.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Coordinates:
    row: int
    column: int

    @classmethod
    def from_algebraic(cls, cell: str) -> Coordinates:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). Letter is the column, digit the row."""
        if len(cell) != 2 or not cell[0].isalpha() or not cell[1].isdecimal():
            raise InvalidPositionError(f"Invalid algebraic notation: {cell!r}")

        coordinates = cls(int(cell[1]) - 1, ord(cell[0].lower()) - ord("a"))
        if not coordinates.is_within_bounds():
            raise InvalidPositionError(f"Cell off the board: {cell!r}")
        return coordinates

    def to_algebraic(self) -> str:
        return f"{chr(self.column + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.column < BOARD_SIZE)
