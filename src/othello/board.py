"""The Board implements all rules that affect the cells: who owns which cell, which moves bracket opponent pieces, and flipping them."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from src.core.exceptions import (
    CellOccupiedError,
    EmptyCellError,
    IllegalMoveError,
    InvalidPositionError,
    InvalidSnapshotError,
)
from src.core.shared_types import CellState, Player
from src.othello.coordinates import BOARD_SIZE, Coordinates

logger = logging.getLogger(__name__)

Grid = list[list[CellState]]
Vector = tuple[int, int]

# N, NE, E, SE, S, SW, W, NW as (row delta, column delta)
DIRECTIONS: tuple[Vector, ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)

STARTING_PIECES: dict[Coordinates, CellState] = {
    Coordinates(3, 3): CellState.WHITE,
    Coordinates(3, 4): CellState.BLACK,
    Coordinates(4, 3): CellState.BLACK,
    Coordinates(4, 4): CellState.WHITE,
}

ROW_CHARACTERS: dict[str, CellState] = {
    ".": CellState.EMPTY,
    "B": CellState.BLACK,
    "W": CellState.WHITE,
}
CELL_CHARACTERS: dict[CellState, str] = {
    value: key for key, value in ROW_CHARACTERS.items()
}


def _empty_grid() -> Grid:
    return [[CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _starting_grid() -> Grid:
    grid = _empty_grid()
    for cell, state in STARTING_PIECES.items():
        grid[cell.row][cell.column] = state
    return grid


def _in_bounds(row: int, column: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE


@dataclass
class Board:
    grid: Grid = field(default_factory=_starting_grid)

    # --- CONSTRUCTION (setup / tests) ---
    @classmethod
    def empty(cls) -> Self:
        return cls(_empty_grid())

    @classmethod
    def from_rows(cls, rows: list[str]) -> Self:
        """Construct a board from 8 strings of 8 characters each.

        * 'B': black piece
        * 'W': white piece
        * '.': empty cell

        ex. the starting position:
        ["........", "........", "........", "...WB...", "...BW...", "........", "........", "........"]

        NOTE: this bypasses every legality check. It is meant for setting up positions, not for playing.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise InvalidSnapshotError(
                f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} characters, got {rows!r}"
            )
        try:
            grid = [[ROW_CHARACTERS[character] for character in row] for row in rows]
        except KeyError as e:
            raise InvalidSnapshotError(
                f"Unknown cell character {e.args[0]!r}. Use one of {''.join(ROW_CHARACTERS)}"
            ) from e
        return cls(grid)

    def to_rows(self) -> list[str]:
        return ["".join(CELL_CHARACTERS[state] for state in row) for row in self.grid]

    def __str__(self) -> str:
        header = "  " + " ".join("abcdefgh")
        lines = [
            f"{row_idx + 1} " + " ".join(row) for row_idx, row in enumerate(self.to_rows())
        ]
        return "\n".join([header, *lines])

    # --- QUERIES ---
    @property
    def size(self) -> int:
        return BOARD_SIZE

    def reset(self) -> None:
        """Clear the board, then put the four starting pieces in the center."""
        self.grid = _starting_grid()

    def is_empty(self, row: int, column: int) -> bool:
        """Out of bounds is not an error, just not empty."""
        return _in_bounds(row, column) and self.grid[row][column].is_empty()

    def player_at(self, row: int, column: int) -> Optional[Player]:
        if not _in_bounds(row, column):
            return None
        return self.grid[row][column].to_player()

    def count_pieces(self, player: Player) -> int:
        target = CellState.from_player(player)
        return sum(state == target for row in self.grid for state in row)

    def cells(self) -> Iterator[Coordinates]:
        """All cells in row-major order (row ascending, then column ascending)"""
        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                yield Coordinates(row, column)

    # --- CAPTURE RULES ---
    def is_valid_move(self, row: int, column: int, player: Player) -> bool:
        """
        A move is legal if it brackets opponent pieces in at least one direction.
        ---

        For every direction:
        1. the neighbouring cell must hold an opponent piece (otherwise: next direction)
        2. keep walking while the cells hold opponent pieces
        3. ending on one of your own pieces --> legal (no need to look further)
        4. ending on an empty cell or the edge of the board --> this direction does not count
        """
        if not self.is_empty(row, column):
            return False

        opponent = player.opponent
        for dr, dc in DIRECTIONS:
            r, c = row + dr, column + dc
            if self.player_at(r, c) != opponent:
                continue

            r, c = r + dr, c + dc
            while _in_bounds(r, c):
                occupant = self.player_at(r, c)
                if occupant is None:
                    break
                if occupant == player:
                    return True
                r, c = r + dr, c + dc
        return False

    def find_all_flippable_pieces(
        self, row: int, column: int, player: Player
    ) -> list[Coordinates]:
        """Union of the bracketed opponent runs over all 8 directions (N, NE, ..., NW)."""
        if not self.is_empty(row, column):
            return []

        flippable: list[Coordinates] = []
        for direction in DIRECTIONS:
            flippable.extend(self._flippable_in_direction(row, column, direction, player))
        return flippable

    def _flippable_in_direction(
        self, row: int, column: int, direction: Vector, player: Player
    ) -> list[Coordinates]:
        """Collect opponent pieces until something else shows up. Only keep them if that something is your own piece."""
        dr, dc = direction
        opponent = player.opponent
        run: list[Coordinates] = []

        r, c = row + dr, column + dc
        while self.player_at(r, c) == opponent:
            run.append(Coordinates(r, c))
            r, c = r + dr, c + dc

        if run and self.player_at(r, c) == player:
            return run
        return []

    def has_valid_moves(self, player: Player) -> bool:
        return any(
            self.is_valid_move(cell.row, cell.column, player) for cell in self.cells()
        )

    def valid_moves(self, player: Player) -> list[Coordinates]:
        return [
            cell
            for cell in self.cells()
            if self.is_valid_move(cell.row, cell.column, player)
        ]

    # --- MUTATIONS ---
    def place_piece(self, row: int, column: int, player: Player) -> None:
        if not _in_bounds(row, column):
            raise InvalidPositionError(f"Invalid position: ({row}, {column})")
        if not self.is_empty(row, column):
            raise CellOccupiedError(f"Cell is not empty: ({row}, {column})")
        self.grid[row][column] = CellState.from_player(player)

    def flip_piece(self, row: int, column: int, player: Player) -> None:
        if not _in_bounds(row, column):
            raise InvalidPositionError(f"Invalid position: ({row}, {column})")
        if self.grid[row][column].is_empty():
            raise EmptyCellError(f"Cannot flip empty cell: ({row}, {column})")
        self.grid[row][column] = CellState.from_player(player)

    def execute_move(self, row: int, column: int, player: Player) -> int:
        """
        Play a complete move: place the piece and flip every bracketed opponent piece.
        Returns the number of flipped pieces.

        This is the only path by which gameplay changes the board.
        """
        if not self.is_valid_move(row, column, player):
            raise IllegalMoveError(
                f"{player} cannot play {Coordinates(row, column).to_algebraic()}"
            )

        pieces_to_flip = self.find_all_flippable_pieces(row, column, player)
        self.place_piece(row, column, player)
        for cell in pieces_to_flip:
            self.flip_piece(cell.row, cell.column, player)

        logger.debug(
            "%s plays %s, flips %s",
            player,
            Coordinates(row, column).to_algebraic(),
            " ".join(cell.to_algebraic() for cell in pieces_to_flip),
        )
        return len(pieces_to_flip)

    # --- SNAPSHOTS ---
    def snapshot(self) -> Grid:
        """Deep copy of the grid (CellState members are immutable, so copying the rows suffices)"""
        return [list(row) for row in self.grid]

    def restore_from_snapshot(self, snapshot: Grid) -> None:
        if len(snapshot) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in snapshot):
            raise InvalidSnapshotError(
                f"Snapshot must be {BOARD_SIZE}x{BOARD_SIZE}"
            )
        self.grid = [list(row) for row in snapshot]
