"""Error taxonomy for the leaderboard store."""

from typing import Optional


class ScoreboardError(Exception):
    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidInput(ScoreboardError):
    """Raised when a submitted entry is missing fields or has the wrong types."""

    def __init__(self, message: str = "Invalid score data."):
        super().__init__(message, code="invalid_input")


class StorageReadError(ScoreboardError):
    """Raised when persisted data cannot be read or parsed.

    The store recovers from this locally; callers never see it.
    """

    def __init__(self, message: str):
        super().__init__(message, code="storage_read_error")


class StorageWriteError(ScoreboardError):
    """Raised when the leaderboard could not be durably written."""

    def __init__(self, message: str):
        super().__init__(message, code="storage_write_error")


__all__ = ["ScoreboardError", "InvalidInput", "StorageReadError", "StorageWriteError"]
