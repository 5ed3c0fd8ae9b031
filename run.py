"""Entry point for serving the Event Registration API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``; see
``event_registration_api.app.core.config``), so the script can be
launched as is by a process manager or inside a container.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from event_registration_api.app.core.config import settings
from event_registration_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
