"""
Errors raised across the layers.

Everything derives from GameError, so the service (or whoever embeds the engine) can catch one type.

NOTE: an illegal move during normal play is NOT an exception: Game.play_move returns MoveResult(valid=False).
IllegalMoveError is only raised when Board.execute_move is called directly with a move that does not bracket anything.
"""


class GameError(Exception):
    """Base class for all errors of this package"""


# --- BOARD: contract violations, should not happen during normal play ---
class BoardError(GameError):
    """Misuse of the board's invariants"""


class InvalidPositionError(BoardError):
    """Row/column outside of the 8x8 board"""


class CellOccupiedError(BoardError):
    """Trying to place a piece on a cell that already holds one"""


class EmptyCellError(BoardError):
    """Trying to flip a cell without a piece on it"""


class IllegalMoveError(BoardError):
    """Executing a move that does not capture anything"""


class InvalidSnapshotError(BoardError):
    """Restoring the board from a grid that is not 8x8"""


# --- GAME / SERVICE ---
class GameStateError(GameError):
    """Requested action does not fit the current state of the game"""


class NotYourTurnError(GameError):
    """A human tried to move while the robot is due to play (or vice versa)"""


class RepositoryError(GameError):
    """Game could not be found / stored"""


class InvalidRequestError(GameError):
    """Request did not pass validation. Not a ValueError on purpose: pydantic re-raises it as is."""


class ConfigError(GameError):
    """Environment variable could not be interpreted"""
