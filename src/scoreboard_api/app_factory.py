from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from scoreboard_api.exception_handlers import add_exception_handlers
from scoreboard_api.routes import health as health_routes
from scoreboard_api.routes import scores as scores_routes
from scoreboard_core import __version__
from scoreboard_core.logging import configure_logging
from scoreboard_core.settings import Settings, get_settings
from scoreboard_core.storage import JsonFileStorage
from scoreboard_core.store import LeaderboardStore

logger = logging.getLogger("scoreboard_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Score server is running. Leaderboard storage: %r", app.state.store.storage)
    yield
    logger.info("Score server stopped")


def _mount_static(app: FastAPI, settings: Settings) -> None:
    if settings.static_dir is None:
        return
    if not settings.static_dir.is_dir():
        logger.warning(
            "Static directory %s not found; static files will not be served",
            settings.static_dir,
        )
        return
    # Mounted last so the API routes take precedence over files at "/".
    app.mount("/", StaticFiles(directory=str(settings.static_dir), html=True), name="static")
    logger.info("Serving static files from %s", settings.static_dir)


def create_app(
    settings: Optional[Settings] = None, store: Optional[LeaderboardStore] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Runtime settings; read from the environment when omitted.
        store: Leaderboard store; a file-backed store built from settings when omitted.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if store is None:
        store = LeaderboardStore(
            JsonFileStorage(settings.scores_file, atomic=settings.atomic_writes)
        )

    app = FastAPI(
        title="Score Server",
        description="Top-10 leaderboard backend for browser games.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=False,
    )

    add_exception_handlers(app)
    app.include_router(scores_routes.router)
    app.include_router(health_routes.router)
    _mount_static(app, settings)

    return app
