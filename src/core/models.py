"""
End-of-game statistics.

GameSummary is what the service hands out once a game is finished or drawn: result, scores, move count and the
played time as a clock string (format_elapsed).
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import GameMode, Player, Status


def format_elapsed(millis: int) -> str:
    """Milliseconds --> 'MM:SS' (minutes keep counting past 59)"""
    seconds = millis // 1000
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class GameSummary:
    """End of game statistics, what the game-over screen shows."""

    status: Status
    winner: Optional[Player]
    black_score: int
    white_score: int
    total_moves: int
    elapsed: str
    mode: GameMode

    @property
    def headline(self) -> str:
        if self.winner is None:
            return "It's a draw!"
        return f"{self.winner.value.capitalize()} wins!"
