#!/usr/bin/env python3
"""
Score server CLI entry point.

Usage examples:
  - Run the HTTP server:
      scoreboard serve --port 3000

  - Print the current leaderboard:
      scoreboard show

  - Submit a score without going through HTTP:
      scoreboard submit ACE 4200
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from scoreboard_core.exceptions import InvalidInput, StorageWriteError
from scoreboard_core.logging import configure_logging
from scoreboard_core.settings import Settings, get_settings
from scoreboard_core.storage import JsonFileStorage
from scoreboard_core.store import LeaderboardStore

LOG = logging.getLogger("scoreboard.cli")


def _parse_score(value: str):
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"score must be a number, got {value!r}")


def _store_from(settings: Settings) -> LeaderboardStore:
    return LeaderboardStore(JsonFileStorage(settings.scores_file, atomic=settings.atomic_writes))


def _print_leaderboard(store: LeaderboardStore) -> None:
    for position, entry in enumerate(store.load(), start=1):
        print(f"{position:>2}. {entry.name:<20} {entry.score}")


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    host = args.host or settings.host
    port = args.port or settings.port
    if args.reload or settings.reload:
        uvicorn.run("scoreboard_api.main:app", host=host, port=port, reload=True)
    else:
        from scoreboard_api.app_factory import create_app

        uvicorn.run(create_app(settings), host=host, port=port)
    return 0


def cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    _print_leaderboard(_store_from(settings))
    return 0


def cmd_submit(args: argparse.Namespace, settings: Settings) -> int:
    store = _store_from(settings)
    try:
        store.submit({"name": args.name, "score": args.score})
    except InvalidInput as e:
        LOG.error("Invalid score data: %s", e)
        return 2
    except StorageWriteError as e:
        LOG.error("Score not saved: %s", e)
        return 1
    print("Score saved!")
    _print_leaderboard(store)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scoreboard", description="Top-10 leaderboard server")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind host (default from settings)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default from settings)")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve.set_defaults(func=cmd_serve)

    show = sub.add_parser("show", help="Print the current leaderboard")
    show.set_defaults(func=cmd_show)

    submit = sub.add_parser("submit", help="Submit a score")
    submit.add_argument("name")
    submit.add_argument("score", type=_parse_score)
    submit.set_defaults(func=cmd_submit)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings)
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
