"""Leaderboard Store - load, rank and save a bounded list of named scores.

Every call goes back to storage; nothing is cached between calls. Usage:

    store = LeaderboardStore(JsonFileStorage("scores.json"))
    store.submit({"name": "ACE", "score": 4200})
    top = store.load()
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Iterable, List

from scoreboard_core.exceptions import InvalidInput, StorageReadError, StorageWriteError
from scoreboard_core.models import MAX_ENTRIES, ScoreEntry, default_leaderboard, rank
from scoreboard_core.storage import LeaderboardStorage

logger = logging.getLogger(__name__)


def encode_leaderboard(entries: Iterable[ScoreEntry]) -> bytes:
    return json.dumps([e.to_dict() for e in entries], indent=2).encode("utf-8")


def decode_leaderboard(data: bytes) -> List[ScoreEntry]:
    """Parse stored bytes into entries, raising StorageReadError on anything malformed."""
    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise StorageReadError(f"Leaderboard data is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise StorageReadError(
            f"Leaderboard data must be an array, got {type(raw).__name__}"
        )
    try:
        return [ScoreEntry.from_raw(item) for item in raw]
    except InvalidInput as e:
        raise StorageReadError("Leaderboard data contains an invalid record") from e


class LeaderboardStore:
    """
    Ranked top-N list persisted through an injected storage backend.

    Attributes:
        storage: Backend holding the serialized leaderboard.
        max_entries: Upper bound on persisted entries.
    """

    def __init__(self, storage: LeaderboardStorage, max_entries: int = MAX_ENTRIES):
        self.storage = storage
        self.max_entries = max_entries
        # Serializes read-modify-write within this process only.
        self._lock = threading.Lock()

    def load(self) -> List[ScoreEntry]:
        """
        Return the persisted leaderboard as stored (no re-sort).

        Missing, empty, unreadable or malformed storage yields the default seed
        list. Read problems are logged and never raised.
        """
        try:
            data = self.storage.read()
        except OSError as e:
            self._log_read_failure(StorageReadError(f"Could not read leaderboard: {e}"))
            return default_leaderboard()

        if not data:
            return default_leaderboard()

        try:
            return decode_leaderboard(data)
        except StorageReadError as e:
            self._log_read_failure(e)
            return default_leaderboard()

    def save(self, entries: Iterable[ScoreEntry]) -> List[ScoreEntry]:
        """
        Sort a copy of `entries` descending by score, keep the top `max_entries`
        and replace the stored leaderboard with it.

        Raises:
            StorageWriteError: if the backend write fails.
        """
        ranked = rank(list(entries), self.max_entries)
        try:
            self.storage.write(encode_leaderboard(ranked))
        except OSError as e:
            logger.error("Failed to write leaderboard to %r: %s", self.storage, e)
            raise StorageWriteError(f"Could not write leaderboard: {e}") from e
        return ranked

    def submit(self, raw_entry: Any) -> List[ScoreEntry]:
        """
        Validate and append one entry, then persist the re-ranked list.

        The entry is appended even if it duplicates an existing one or ranks
        below the cut, in which case it is dropped by the truncation.

        Raises:
            InvalidInput: before any storage access, if the entry is malformed.
            StorageWriteError: if the result could not be persisted.
        """
        entry = ScoreEntry.from_raw(raw_entry)
        logger.info("Received new score: %s - %s", entry.name, entry.score)

        with self._lock:
            entries = self.load()
            entries.append(entry)
            self.save(entries)
            return self.load()

    def _log_read_failure(self, error: StorageReadError) -> None:
        logger.error(
            "Error reading leaderboard from %r, using default leaderboard: %s",
            self.storage,
            error,
            exc_info=True,
        )
