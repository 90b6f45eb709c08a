"""Records describing the outcome of a move and the state needed to undo it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Player, Status
from src.othello.board import Grid


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of Game.play_move.

    NOTE: an invalid result never had a side effect: flipped_count=0, status=IN_PROGRESS, next_player=None.
    """

    valid: bool
    flipped_count: int
    status: Status
    next_player: Optional[Player]

    @classmethod
    def invalid(cls) -> MoveResult:
        return cls(False, 0, Status.IN_PROGRESS, None)

    @classmethod
    def accepted(
        cls, flipped_count: int, status: Status, next_player: Player
    ) -> MoveResult:
        return cls(True, flipped_count, status, next_player)


@dataclass(frozen=True)
class MoveSnapshot:
    """State right BEFORE a move was applied. elapsed_millis is supplied by the caller (the engine has no clock)."""

    board: Grid
    current_player: Player
    elapsed_millis: int
