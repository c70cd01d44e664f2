"""Leaderboard routes: read the top scores and submit a new one."""

from __future__ import annotations

import json
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from scoreboard_api.dependencies import get_store
from scoreboard_api.schemas import MessageResponse, ScoreEntryModel
from scoreboard_core.exceptions import InvalidInput
from scoreboard_core.store import LeaderboardStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["scores"])


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def _read_json_body(request: Request) -> Any:
    content_type = request.headers.get("content-type", "")
    if not _is_json_content_type(content_type):
        raise InvalidInput(f"Unsupported content type: {content_type or 'none'}")
    body = await request.body()
    if not body:
        raise InvalidInput("Request body is empty")
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as e:
        raise InvalidInput(f"Request body is not valid JSON: {e}") from e


@router.get("/get-scores", response_model=List[ScoreEntryModel])
def get_scores(store: LeaderboardStore = Depends(get_store)):
    """Return the current leaderboard as a raw array, best score first."""
    logger.info("Request received for /get-scores. Sending leaderboard.")
    return [entry.to_dict() for entry in store.load()]


@router.post("/submit-score", response_model=MessageResponse, status_code=201)
async def submit_score(request: Request, store: LeaderboardStore = Depends(get_store)):
    """
    Submit a score. The raw body is validated by the store, not by a request schema.

    Returns the same acknowledgment whether or not the score made the leaderboard.
    """
    payload = await _read_json_body(request)
    await run_in_threadpool(store.submit, payload)
    return {"message": "Score saved!"}
