"""
Move selection for the robot opponent.

Key idea: same strategy pattern as a rules table. Each difficulty maps onto a function that picks one of the legal moves.
Strategies only look at the board (one ply), they never mutate it. Game applies the chosen move.
"""

import logging
import random
from typing import Callable, Optional, Protocol

from src.core.shared_types import Player, RobotDifficulty
from src.othello.coordinates import Coordinates

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the part the strategies need"""

    def find_all_flippable_pieces(
        self, row: int, column: int, player: Player
    ) -> list[Coordinates]: ...


StrategyFn = Callable[
    [Board, Player, list[Coordinates], random.Random], Optional[Coordinates]
]


def random_move(
    board: Board, player: Player, valid_moves: list[Coordinates], rng: random.Random
) -> Optional[Coordinates]:
    """Uniformly random legal move"""
    if not valid_moves:
        return None
    return rng.choice(valid_moves)


def best_move(
    board: Board, player: Player, valid_moves: list[Coordinates], rng: random.Random
) -> Optional[Coordinates]:
    """
    Greedy: the move that flips the most pieces right now.

    NOTE valid_moves are in row-major order and only a strictly larger count replaces the current pick,
    so on a tie the earliest move wins.
    """
    chosen: Optional[Coordinates] = None
    max_flips = -1
    for move in valid_moves:
        flips = len(board.find_all_flippable_pieces(move.row, move.column, player))
        if flips > max_flips:
            max_flips = flips
            chosen = move

    if chosen is not None:
        logger.debug("best move for %s: %s (%d flips)", player, chosen.to_algebraic(), max_flips)
    return chosen


ROBOT_STRATEGIES: dict[RobotDifficulty, StrategyFn] = {
    RobotDifficulty.EASY: random_move,
    RobotDifficulty.HARD: best_move,
}
