"""
The Game class is the entrypoint into the domain layer for the service layer (or any UI controller embedding the engine).
It is responsible for orchestrating everything around a single move: whose turn it is, passing, ending the game,
the undo history and the robot opponent. The Board does the actual capturing.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.shared_types import Player, RobotDifficulty, Status
from src.othello.board import Board
from src.othello.coordinates import Coordinates
from src.othello.moves import MoveResult, MoveSnapshot
from src.othello.robot import ROBOT_STRATEGIES, StrategyFn

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board)
    current_player: Player = Player.BLACK
    status: Status = Status.IN_PROGRESS
    total_moves: int = 0
    history: list[MoveSnapshot] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def from_board(
        cls,
        board: Board,
        current_player: Player = Player.BLACK,
        rng: Optional[random.Random] = None,
    ) -> Self:
        """Start from a non-standard position (set up with Board.from_rows for instance)."""
        return cls(
            board=board,
            current_player=current_player,
            rng=rng if rng is not None else random.Random(),
        )

    @property
    def winner(self) -> Optional[Player]:
        """Only defined once the game is FINISHED. A finished game never has equal piece counts."""
        if self.status != Status.FINISHED:
            return None
        black = self.board.count_pieces(Player.BLACK)
        white = self.board.count_pieces(Player.WHITE)
        return Player.BLACK if black > white else Player.WHITE

    @property
    def history_depth(self) -> int:
        return len(self.history)

    def reset(self) -> None:
        self.board.reset()
        self.current_player = Player.BLACK
        self.status = Status.IN_PROGRESS
        self.history.clear()
        self.total_moves = 0

    def play_move(self, row: int, column: int, elapsed_millis: int = 0) -> MoveResult:
        """
        Attempt to play a move for the current player
        -----

        1. game already over, or move does not bracket anything --> invalid result, nothing changes
        2. store a snapshot of the state BEFORE the move (for undo)
        3. update the board
        4. count the move
        5. hand the turn to the opponent, then check for a pass / end of game
        """
        if self.status != Status.IN_PROGRESS:
            return MoveResult.invalid()

        if not self.board.is_valid_move(row, column, self.current_player):
            # A dead position (set up without moves for either player) resolves here. Pieces and turn stay untouched.
            if not self.board.has_valid_moves(self.current_player) and not self.board.has_valid_moves(
                self.current_player.opponent
            ):
                self._end_game()
            return MoveResult.invalid()

        self._update_history(elapsed_millis)

        flipped_count = self.board.execute_move(row, column, self.current_player)
        self.total_moves += 1

        self.current_player = self.current_player.opponent
        self._update_game_status()

        return MoveResult.accepted(flipped_count, self.status, self.current_player)

    def undo(self) -> bool:
        """
        Revert the last move. Returns False if there is nothing to undo.

        NOTE: total_moves is NOT decremented: it counts the moves ever played in this game, not the pieces on the board.
        NOTE: undo always brings the game back in progress, also from a finished game.
        """
        if not self.history:
            return False

        snapshot = self.history.pop()
        self.board.restore_from_snapshot(snapshot.board)
        self.current_player = snapshot.current_player
        self._change_status(Status.IN_PROGRESS)
        logger.info("Undo: %s to move, %d moves left in history", self.current_player, len(self.history))
        return True

    def last_snapshot_elapsed_millis(self) -> int:
        """Lets the caller resynchronise its clock after an undo. 0 if there is no history."""
        if not self.history:
            return 0
        return self.history[-1].elapsed_millis

    def get_valid_moves(self, player: Player) -> list[Coordinates]:
        """Row-major order. The order matters: the robot breaks ties with it and the UI shows suggestions in it."""
        return self.board.valid_moves(player)

    def has_valid_moves(self, player: Player) -> bool:
        return self.board.has_valid_moves(player)

    # --- ROBOT ---
    def play_random_move(self, elapsed_millis: int = 0) -> Optional[Coordinates]:
        return self.play_robot_move(RobotDifficulty.EASY, elapsed_millis)

    def play_best_move(self, elapsed_millis: int = 0) -> Optional[Coordinates]:
        return self.play_robot_move(RobotDifficulty.HARD, elapsed_millis)

    def play_robot_move(
        self, difficulty: RobotDifficulty, elapsed_millis: int = 0
    ) -> Optional[Coordinates]:
        """Choose a move for the current player according to the difficulty and play it. None if there is no move."""
        strategy: StrategyFn = ROBOT_STRATEGIES[difficulty]
        if self.status != Status.IN_PROGRESS:
            return None

        player = self.current_player
        choice = strategy(self.board, player, self.get_valid_moves(player), self.rng)
        if choice is None:
            return None

        logger.debug("Robot (%s) plays %s for %s", difficulty, choice.to_algebraic(), player)
        self.play_move(choice.row, choice.column, elapsed_millis)
        return choice

    # -- PRIVATE HELPERS ---
    def _update_history(self, elapsed_millis: int) -> None:
        """Before making a new move, commit the state prior to the move to the history."""
        self.history.append(
            MoveSnapshot(
                board=self.board.snapshot(),
                current_player=self.current_player,
                elapsed_millis=elapsed_millis,
            )
        )

    def _update_game_status(self) -> None:
        """
        Advance the turn to the first player able to move, starting with the one whose turn it is now.
        If nobody can move, the game is over.

        NOTE with two players: the player to move passes silently back to the player who just moved.
        If that one can't move either, the turn stays with them and the game ends.
        """
        turn_order = [self.current_player, self.current_player.opponent]
        for player in turn_order:
            if self.board.has_valid_moves(player):
                if player != turn_order[0]:
                    logger.debug("%s has no legal move and passes", turn_order[0])
                self.current_player = player
                return

        self.current_player = turn_order[-1]
        self._end_game()

    def _end_game(self) -> None:
        black = self.board.count_pieces(Player.BLACK)
        white = self.board.count_pieces(Player.WHITE)
        self._change_status(Status.DRAW if black == white else Status.FINISHED)
        logger.info("Game over (%s): black %d - white %d", self.status, black, white)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
