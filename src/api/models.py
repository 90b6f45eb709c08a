"""Requests and Response models exchanged with the UI controller (in-process, there is no network layer)."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameMode, Player, Status
from src.othello.coordinates import BOARD_SIZE


class Cell(BaseModel):
    row: int
    column: int


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    mode: Optional[GameMode] = None  # None --> default mode from the settings


class GetGameRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    row: int
    column: int
    elapsed_millis: int = 0

    @field_validator(*["row", "column"])
    @classmethod
    def validate_on_board(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Row/column must lie between 0 and {BOARD_SIZE - 1}, got {value}."
            )
        return value

    @field_validator("elapsed_millis")
    @classmethod
    def validate_elapsed(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Elapsed time cannot be negative: {value}")
        return value


class RobotMoveRequest(BaseModel):
    game_id: UUID
    elapsed_millis: int = 0

    @field_validator("elapsed_millis")
    @classmethod
    def validate_elapsed(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Elapsed time cannot be negative: {value}")
        return value


class UndoRequest(BaseModel):
    game_id: UUID


class ResetRequest(BaseModel):
    game_id: UUID
    mode: Optional[GameMode] = None  # None --> keep playing in the same mode


class GameOverRequest(BaseModel):
    game_id: UUID
    elapsed_millis: int = 0

    @field_validator("elapsed_millis")
    @classmethod
    def validate_elapsed(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Elapsed time cannot be negative: {value}")
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    mode: GameMode
    board: list[str]  # 8 rows of 'B', 'W', '.'
    current_player: Player
    status: Status
    winner: Optional[Player]
    black_score: int
    white_score: int
    total_moves: int
    suggestions: list[Cell]
    last_robot_move: Optional[Cell]
    robot_to_move: bool


class MoveResponse(BaseModel):
    game_id: UUID
    valid: bool
    flipped_count: int
    status: Status
    next_player: Optional[Player]
    game: GameResponse


class RobotMoveResponse(BaseModel):
    game_id: UUID
    move: Optional[Cell]
    game: GameResponse


class UndoResponse(BaseModel):
    game_id: UUID
    undone: bool
    elapsed_millis: int  # clock value to display again after the undo
    game: GameResponse


class GameOverResponse(BaseModel):
    game_id: UUID
    status: Status
    winner: Optional[Player]
    headline: str
    black_score: int
    white_score: int
    total_moves: int
    elapsed: str
    mode: GameMode
