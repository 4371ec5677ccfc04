"""Entry point serving the String Service API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables through the application settings.  Defaults are ``0.0.0.0``
and ``8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from string_service_api.app.core.config import settings
from string_service_api.app.main import app


async def serve() -> None:
    """Run the API with Uvicorn until it is stopped."""
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
    logging.getLogger(__name__).info("listening on %s:%s", settings.host, settings.port)
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
