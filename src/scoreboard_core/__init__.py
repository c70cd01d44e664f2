"""Core persistence and ranking logic for the score server."""

from scoreboard_core.exceptions import (
    InvalidInput,
    ScoreboardError,
    StorageReadError,
    StorageWriteError,
)
from scoreboard_core.models import MAX_ENTRIES, ScoreEntry, default_leaderboard
from scoreboard_core.storage import InMemoryStorage, JsonFileStorage, LeaderboardStorage
from scoreboard_core.store import LeaderboardStore

__version__ = "0.1.0"

__all__ = [
    "InvalidInput",
    "ScoreboardError",
    "StorageReadError",
    "StorageWriteError",
    "MAX_ENTRIES",
    "ScoreEntry",
    "default_leaderboard",
    "InMemoryStorage",
    "JsonFileStorage",
    "LeaderboardStorage",
    "LeaderboardStore",
    "__version__",
]
