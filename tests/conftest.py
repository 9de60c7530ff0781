import random

import pytest

from database.manager import LeaderboardStore
from database.migrations import initialize_database
from game.engine import GameSession
from helpers import FakeStore


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def ended():
    return []


@pytest.fixture
def session(rng, ended):
    return GameSession(rng=rng, on_end=ended.append)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
async def store(tmp_path):
    db_path = str(tmp_path / "reflex.db")
    await initialize_database(db_path)
    return LeaderboardStore(db_path)
