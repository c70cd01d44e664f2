from fastapi import Request

from scoreboard_core.store import LeaderboardStore


def get_store(request: Request) -> LeaderboardStore:
    """Dependency injection for the leaderboard store attached by create_app."""
    return request.app.state.store
