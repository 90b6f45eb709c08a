"""Unit tests for /src/db/memory_repository.py"""

from uuid import UUID, uuid4

from src.core.shared_types import GameMode
from src.db.memory_repository import InMemoryGameRepository
from src.othello.session import GameSession


def test_create_and_get(repository: InMemoryGameRepository) -> None:
    session = GameSession(mode=GameMode.PLAYER_VS_EASY_ROBOT)
    stored, game_id = repository.create_game(session)

    assert stored is session
    assert isinstance(game_id, UUID)
    assert repository.get_game(game_id) is session
    assert len(repository) == 1


def test_ids_are_unique(repository: InMemoryGameRepository) -> None:
    ids = {repository.create_game(GameSession())[1] for _ in range(10)}
    assert len(ids) == 10


def test_get_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.get_game(uuid4()) is None


def test_update_game(repository: InMemoryGameRepository) -> None:
    _, game_id = repository.create_game(GameSession())
    replacement = GameSession(mode=GameMode.PLAYER_VS_HARD_ROBOT)

    assert repository.update_game(game_id, replacement) is replacement
    assert repository.get_game(game_id) is replacement


def test_update_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.update_game(uuid4(), GameSession()) is None
    assert len(repository) == 0


def test_delete_game(repository: InMemoryGameRepository) -> None:
    session = GameSession()
    _, game_id = repository.create_game(session)

    assert repository.delete_game(game_id) is session
    assert repository.get_game(game_id) is None
    assert repository.delete_game(game_id) is None
