"""
Logging bootstrap for the score server.

Usage:
    from scoreboard_core.settings import get_settings
    from scoreboard_core.logging import configure_logging

    configure_logging(get_settings())  # idempotent

- Supports JSON and plain formats
- Supports stdout/stderr/file destinations
- Applies the configured level to the root logger and uvicorn's loggers
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from pythonjsonlogger import jsonlogger

_configured = False


def _level_from_str(level: str) -> int:
    try:
        return getattr(logging, level.upper())
    except AttributeError:
        return logging.INFO


def _make_handler(destination: str, filename: Optional[str]) -> logging.Handler:
    if destination == "stdout":
        return logging.StreamHandler(stream=sys.stdout)
    if destination == "stderr":
        return logging.StreamHandler(stream=sys.stderr)
    path = Path(filename or "scoreboard.log")
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def _make_formatter(json_enabled: bool, fmt: str) -> logging.Formatter:
    if json_enabled:
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(process)d %(threadName)s"
        )
    return logging.Formatter(fmt)


def configure_logging(settings=None, *, force: bool = False) -> None:
    """
    Configure root logging according to settings.logging. Safe to call multiple times.

    Params:
      - settings: scoreboard_core.settings.Settings (loaded from the environment if None)
      - force: if True, reconfigure even if already configured
    """
    global _configured

    already_configured = _configured or bool(logging.getLogger().handlers)
    if already_configured and not force:
        return

    if settings is None:
        from scoreboard_core.settings import get_settings

        settings = get_settings()

    cfg = settings.logging
    lvl = _level_from_str(cfg.level)
    handler = _make_handler(cfg.destination, cfg.filename)
    handler.setFormatter(_make_formatter(cfg.json_format, cfg.format))

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(lvl)
    root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.setLevel(max(lvl, logging.INFO))

    _configured = True

