"""Entry point for serving the Catalog API.

Applies pending migrations and starts Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables; the rest
of the configuration comes from ``catalog_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from catalog_api.app.core.config import settings
from catalog_api.app.core.db import init_db
from catalog_api.app.main import app


async def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    init_db()
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
