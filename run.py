"""Entry point for the contact manager backend.

Serves :mod:`contact_manager.app.main` with uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``5000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contact_manager.app.core.config import settings
from contact_manager.app.main import app


async def main() -> None:
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server starting on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
