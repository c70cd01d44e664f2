"""
Storage backends for the leaderboard.

A backend holds one opaque blob: the serialized leaderboard. The store owns
(de)serialization; backends only move bytes.

    storage = JsonFileStorage("scores.json")
    store = LeaderboardStore(storage)
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)


class LeaderboardStorage(Protocol):
    def read(self) -> Optional[bytes]:
        """Return stored bytes, or None when nothing has been stored. Raises OSError."""
        ...

    def write(self, data: bytes) -> None:
        """Replace stored content in full. Raises OSError."""
        ...


class JsonFileStorage:
    """
    File-backed storage.

    With atomic=True, writes go to a temp file in the target directory and are
    moved into place with os.replace, so readers never observe a half-written file.
    """

    def __init__(self, path: Union[str, Path], atomic: bool = True):
        self.path = Path(path)
        self.atomic = atomic

    def read(self) -> Optional[bytes]:
        if not self.path.exists():
            return None
        return self.path.read_bytes()

    def write(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.atomic:
            self.path.write_bytes(data)
            return

        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except OSError:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp_name)
            raise

    def __repr__(self) -> str:
        return f"JsonFileStorage(path={str(self.path)!r}, atomic={self.atomic})"


class InMemoryStorage:
    """Keeps the blob in memory. Used by tests and throwaway servers."""

    def __init__(self, data: Optional[bytes] = None):
        self.data = data

    def read(self) -> Optional[bytes]:
        return self.data

    def write(self, data: bytes) -> None:
        self.data = bytes(data)

    def __repr__(self) -> str:
        return "InMemoryStorage()"
