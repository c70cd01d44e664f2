import uvicorn

from scoreboard_api.app_factory import create_app
from scoreboard_core.settings import get_settings

# Expose app at module level for ASGI servers
app = create_app()


def run():
    """Run the score server with uvicorn using the configured host and port."""
    settings = get_settings()
    if settings.reload:
        uvicorn.run("scoreboard_api.main:app", host=settings.host, port=settings.port, reload=True)
    else:
        uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
