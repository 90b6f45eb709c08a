"""
What a UI controller keeps next to the Game: the mode it is played in and the cell the robot played last (the view highlights it).
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.shared_types import ROBOT_PLAYER, GameMode, Status
from src.othello.coordinates import Coordinates
from src.othello.game import Game


@dataclass
class GameSession:
    game: Game = field(default_factory=Game)
    mode: GameMode = GameMode.PLAYER_VS_PLAYER
    last_robot_move: Optional[Coordinates] = None

    @property
    def is_robot_turn(self) -> bool:
        return (
            self.mode.robot_enabled
            and self.game.status == Status.IN_PROGRESS
            and self.game.current_player == ROBOT_PLAYER
        )

    def reset(self, mode: Optional[GameMode] = None) -> None:
        """New game, optionally switching to another mode."""
        if mode is not None:
            self.mode = mode
        self.game.reset()
        self.last_robot_move = None
