"""Entry point for the Contact Book API.

This script serves the FastAPI application with Uvicorn.  Host and
port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``); the database location from
``DATABASE_URL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contact_book_api.app.core.config import settings
from contact_book_api.app.core.logging_config import setup_logging
from contact_book_api.app.main import app


logger = logging.getLogger(__name__)


def build_server() -> Server:
    """Create the Uvicorn server for the configured host and port.

    Uvicorn's own logging config is disabled; its loggers go through
    the handlers from ``setup_logging`` (console and ``LOG_FILE``).
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    setup_logging(settings.log_level, settings.log_file)
    return Server(config)


async def main() -> None:
    server = build_server()
    logger.info("Server running on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
