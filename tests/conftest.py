import pytest

from scoreboard_core.storage import InMemoryStorage, JsonFileStorage
from scoreboard_core.store import LeaderboardStore


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def memory_store(memory_storage):
    return LeaderboardStore(memory_storage)


@pytest.fixture
def scores_path(tmp_path):
    return tmp_path / "scores.json"


@pytest.fixture
def file_store(scores_path):
    return LeaderboardStore(JsonFileStorage(scores_path))
