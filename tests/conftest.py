"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import random
from typing import Iterator

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.othello.board import Board

STARTING_ROWS = [
    "........",
    "........",
    "........",
    "...WB...",
    "...BW...",
    "........",
    "........",
    "........",
]

# Black to move. (0,0) flips (0,1) and fills the board: nobody can move anymore, black wins 64-0.
LAST_MOVE_ROWS = [".WBBBBBB"] + ["BBBBBBBB"] * 7

# Nobody can move (board is full)
DRAWN_ROWS = ["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4
BLACK_WINS_ROWS = ["BBBBBBBB"] * 4 + ["WWWWWWWB"] + ["WWWWWWWW"] * 3

# Black to move: legal moves (0,0) and (7,2). After (0,0) white has no move and black has to play again.
PASS_ROWS = [
    ".WB.....",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
    "BW......",
]

# Black to move: (0,2) flips 1, (4,3) flips 2, (7,3) flips 2.
GREEDY_ROWS = [
    "BW......",
    "........",
    "........",
    "........",
    "BWW.....",
    "........",
    "........",
    "BWW.....",
]


@pytest.fixture
def rng() -> random.Random:
    """Seeded, so robot tests are reproducible"""
    return random.Random(1234)


@pytest.fixture
def starting_board() -> Board:
    return Board()


@pytest.fixture
def repository() -> Iterator[InMemoryGameRepository]:
    """Fresh in-memory storage for every test"""
    repo = InMemoryGameRepository()
    yield repo


@pytest.fixture
def last_move_board() -> Board:
    return Board.from_rows(LAST_MOVE_ROWS)


@pytest.fixture
def drawn_board() -> Board:
    return Board.from_rows(DRAWN_ROWS)


@pytest.fixture
def black_wins_board() -> Board:
    return Board.from_rows(BLACK_WINS_ROWS)


@pytest.fixture
def pass_board() -> Board:
    return Board.from_rows(PASS_ROWS)


@pytest.fixture
def greedy_board() -> Board:
    return Board.from_rows(GREEDY_ROWS)
