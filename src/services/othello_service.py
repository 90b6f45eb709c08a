"""Orchestration of communication from the UI controller to the game logic and the session storage (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    Cell,
    CreateGameRequest,
    DeleteGameRequest,
    GameOverRequest,
    GameOverResponse,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
    ResetRequest,
    RobotMoveRequest,
    RobotMoveResponse,
    UndoRequest,
    UndoResponse,
)
from src.core.config import Settings
from src.core.exceptions import GameStateError, NotYourTurnError, RepositoryError
from src.core.models import GameSummary, format_elapsed
from src.core.shared_types import ROBOT_PLAYER, Player, Status
from src.db.repository import GameRepository
from src.othello.coordinates import Coordinates
from src.othello.game import Game
from src.othello.session import GameSession

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an Othello game."""

    def __init__(
        self, repository: GameRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings if settings is not None else Settings()
        # one RNG for all robots, so a seed makes a whole run reproducible
        self._rng = random.Random(self.settings.robot_seed)

    # -- Controller actions ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game in the requested mode (or the configured default)."""
        mode = request.mode if request.mode is not None else self.settings.default_mode
        session = GameSession(game=Game(rng=self._rng), mode=mode)

        stored_session, game_id = self.repo.create_game(session)
        logger.info("New game %s: %s", game_id, mode)
        return self._create_game_response(game_id, stored_session)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Everything the view needs to redraw: pieces, scores, whose turn, suggestions and the robot's last move.
        """
        session = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, session)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        A human clicked on a cell.
        ----
        An illegal move is a normal outcome (valid=False in the response), NOT an error.
        Moving while the robot is due to play, or after the game ended, IS an error.
        """
        session = self._fetch_game(request.game_id)
        game = session.game

        if game.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is over. status: {game.status}")
        if session.is_robot_turn:
            raise NotYourTurnError("Wait for the robot to play first.")

        result = game.play_move(request.row, request.column, request.elapsed_millis)
        if result.valid:
            # the highlight only marks the robot's reply to the previous human move
            session.last_robot_move = None
            self.repo.update_game(request.game_id, session)
        else:
            logger.debug(
                "Game %s: illegal move %s for %s",
                request.game_id,
                Coordinates(request.row, request.column).to_algebraic(),
                game.current_player,
            )

        return MoveResponse(
            game_id=request.game_id,
            valid=result.valid,
            flipped_count=result.flipped_count,
            status=result.status,
            next_player=result.next_player,
            game=self._create_game_response(request.game_id, session),
        )

    def play_robot_move(self, request: RobotMoveRequest) -> RobotMoveResponse:
        """
        Let the robot play its turn.
        ---
        NOTE: The caller decides when (a UI may pause before calling this). The engine does not wait.
        """
        session = self._fetch_game(request.game_id)
        difficulty = session.mode.robot_difficulty
        if difficulty is None:
            raise GameStateError(f"No robot in this game. mode: {session.mode}")
        if not session.is_robot_turn:
            raise NotYourTurnError("It is not the robot's turn.")

        choice = session.game.play_robot_move(difficulty, request.elapsed_millis)
        if choice is not None:
            session.last_robot_move = choice
            self.repo.update_game(request.game_id, session)

        return RobotMoveResponse(
            game_id=request.game_id,
            move=self._to_cell(choice),
            game=self._create_game_response(request.game_id, session),
        )

    def undo(self, request: UndoRequest) -> UndoResponse:
        """
        Take back the last move.
        ---

        Against the robot, the human wants their own last move back: keep undoing until it is the human's turn
        (the robot's reply and the human move before it). Passes mean this is not always exactly two moves.
        """
        session = self._fetch_game(request.game_id)
        game = session.game

        undone = game.undo()
        if undone and session.mode.robot_enabled:
            while game.current_player == ROBOT_PLAYER and game.undo():
                pass
            session.last_robot_move = None

        if undone:
            self.repo.update_game(request.game_id, session)
        else:
            logger.debug("Game %s: no move to undo", request.game_id)

        return UndoResponse(
            game_id=request.game_id,
            undone=undone,
            elapsed_millis=game.last_snapshot_elapsed_millis(),
            game=self._create_game_response(request.game_id, session),
        )

    def reset(self, request: ResetRequest) -> GameResponse:
        """New game on the same board, optionally in another mode."""
        session = self._fetch_game(request.game_id)
        session.reset(request.mode)
        self.repo.update_game(request.game_id, session)
        logger.info("Game %s reset: %s", request.game_id, session.mode)
        return self._create_game_response(request.game_id, session)

    def game_over_summary(self, request: GameOverRequest) -> GameOverResponse:
        """Statistics for the game-over screen."""
        session = self._fetch_game(request.game_id)
        game = session.game
        if game.status == Status.IN_PROGRESS:
            raise GameStateError("Game is still in progress.")

        summary = GameSummary(
            status=game.status,
            winner=game.winner,
            black_score=game.board.count_pieces(Player.BLACK),
            white_score=game.board.count_pieces(Player.WHITE),
            total_moves=game.total_moves,
            elapsed=format_elapsed(request.elapsed_millis),
            mode=session.mode,
        )
        return GameOverResponse(
            game_id=request.game_id,
            status=summary.status,
            winner=summary.winner,
            headline=summary.headline,
            black_score=summary.black_score,
            white_score=summary.white_score,
            total_moves=summary.total_moves,
            elapsed=summary.elapsed,
            mode=summary.mode,
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Forget a game."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, session: GameSession) -> GameResponse:
        """Convert the session into what the view draws."""
        game = session.game
        return GameResponse(
            game_id=game_id,
            mode=session.mode,
            board=game.board.to_rows(),
            current_player=game.current_player,
            status=game.status,
            winner=game.winner,
            black_score=game.board.count_pieces(Player.BLACK),
            white_score=game.board.count_pieces(Player.WHITE),
            total_moves=game.total_moves,
            suggestions=[
                Cell(row=move.row, column=move.column)
                for move in game.get_valid_moves(game.current_player)
            ],
            last_robot_move=self._to_cell(session.last_robot_move),
            robot_to_move=session.is_robot_turn,
        )

    def _to_cell(self, coordinates: Optional[Coordinates]) -> Optional[Cell]:
        if coordinates is None:
            return None
        return Cell(row=coordinates.row, column=coordinates.column)

    def _fetch_game(self, game_id: UUID) -> GameSession:
        """Attempt to find the game in the repository and raise error if it fails."""
        session = self.repo.get_game(game_id)
        if session is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return session
