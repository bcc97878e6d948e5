"""Entry point for the Blog API server.

This script starts the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as HOST, PORT, LOG_LEVEL and CORS_ORIGINS is read
from environment variables (see ``blog_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted.

    Host and port are read from the ``HOST`` and ``PORT`` environment
    variables.  Defaults are ``0.0.0.0`` and ``5000``.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
