from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Union

from scoreboard_core.exceptions import InvalidInput

Number = Union[int, float]

MAX_ENTRIES = 10


@dataclass(frozen=True)
class ScoreEntry:
    """A single named score. Duplicate names are allowed."""

    name: str
    score: Number

    @classmethod
    def from_raw(cls, raw: Any) -> "ScoreEntry":
        """
        Build an entry from untrusted input (a decoded JSON body or a stored record).

        Raises InvalidInput when `name` is not a string or `score` is not a finite number.
        Extra keys are ignored.
        """
        if not isinstance(raw, Mapping):
            raise InvalidInput()
        name = raw.get("name")
        score = raw.get("score")
        if not isinstance(name, str):
            raise InvalidInput()
        if not is_number(score):
            raise InvalidInput()
        return cls(name=name, score=score)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def is_number(value: Any) -> bool:
    # bool is an int subclass but is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def default_leaderboard() -> List[ScoreEntry]:
    """Seed list used whenever no valid leaderboard is persisted."""
    return [
        ScoreEntry("SERVER", 10000),
        ScoreEntry("ADMIN", 7500),
        ScoreEntry("PRO", 5000),
        ScoreEntry("PLAYER", 2500),
        ScoreEntry("NOOB", 1000),
    ]


def rank(entries: List[ScoreEntry], limit: int = MAX_ENTRIES) -> List[ScoreEntry]:
    """Sort descending by score and keep the first `limit` entries. Ties keep input order."""
    return sorted(entries, key=lambda e: e.score, reverse=True)[:limit]
