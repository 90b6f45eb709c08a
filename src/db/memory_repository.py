"""Implementation of (Game)Repository keeping the sessions in a dictionary"""

import logging
from uuid import UUID, uuid4

from src.othello.session import GameSession

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """Sessions are live objects: the service mutates the stored Game directly, update_game just swaps a record."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameSession] = {}

    def get_game(self, game_id: UUID) -> GameSession | None:
        """Get game by ID, if it exists."""
        return self._games.get(game_id)

    def create_game(self, session: GameSession) -> tuple[GameSession, UUID]:
        """Store new game and return the stored session + newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = session
        logger.debug("Stored game %s (%d games)", new_id, len(self._games))
        return session, new_id

    def update_game(self, game_id: UUID, session: GameSession) -> GameSession | None:
        """Replace an existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = session
        return session

    def delete_game(self, game_id: UUID) -> GameSession | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._games)
