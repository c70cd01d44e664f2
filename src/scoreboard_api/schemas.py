from typing import Union

from pydantic import BaseModel, Field


class ScoreEntryModel(BaseModel):
    """Leaderboard row as returned to clients."""

    name: str = Field(..., description="Player name")
    score: Union[int, float] = Field(..., description="Submitted score")


class MessageResponse(BaseModel):
    message: str
