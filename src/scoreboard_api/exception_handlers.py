"""Translate the store's error taxonomy into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from scoreboard_core.exceptions import InvalidInput, StorageWriteError

logger = logging.getLogger(__name__)


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"message": "Invalid score data."})


async def storage_write_error_handler(request: Request, exc: StorageWriteError) -> JSONResponse:
    logger.error("Score not saved for %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"message": "Failed to save score."})


def add_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidInput, invalid_input_handler)
    app.add_exception_handler(StorageWriteError, storage_write_error_handler)
