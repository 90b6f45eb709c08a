"""
Type definitions used across layers
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"
    DRAW = "draw"


class Player(StrEnum):
    """Black always moves first."""

    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> Player:
        return Player.WHITE if self == Player.BLACK else Player.BLACK


# --- NOTE: CellState is NOT the same as Player: a square can be empty, a player can not.
class CellState(StrEnum):
    EMPTY = "empty"
    BLACK = "black"
    WHITE = "white"

    def is_empty(self) -> bool:
        return self == CellState.EMPTY

    @classmethod
    def from_player(cls, player: Optional[Player]) -> CellState:
        if player is None:
            return cls.EMPTY
        return cls(player.value)

    def to_player(self) -> Optional[Player]:
        if self.is_empty():
            return None
        return Player(self.value)


class RobotDifficulty(StrEnum):
    EASY = "easy"  # random legal move
    HARD = "hard"  # move that flips the most pieces


class GameMode(StrEnum):
    """In the robot modes the human always plays black and the robot white."""

    PLAYER_VS_PLAYER = "player vs player"
    PLAYER_VS_EASY_ROBOT = "player vs easy robot"
    PLAYER_VS_HARD_ROBOT = "player vs hard robot"

    @property
    def robot_difficulty(self) -> Optional[RobotDifficulty]:
        return {
            GameMode.PLAYER_VS_EASY_ROBOT: RobotDifficulty.EASY,
            GameMode.PLAYER_VS_HARD_ROBOT: RobotDifficulty.HARD,
        }.get(self)

    @property
    def robot_enabled(self) -> bool:
        return self.robot_difficulty is not None


ROBOT_PLAYER = Player.WHITE
