"""Entry point for serving the User Registry API.

Starts the FastAPI application with Uvicorn on the host and port from
``Settings`` (``HOST`` and ``PORT`` environment variables, defaulting
to ``0.0.0.0`` and ``3100``).

Usage:
    python -m user_registry_api.run
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_registry_api.app.core.config import settings
from user_registry_api.app.main import app


async def serve() -> None:
    """Run the API server until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
