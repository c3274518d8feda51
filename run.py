"""Entry point for the Product Catalog API.

Starts the FastAPI application with Uvicorn on the host and port from
the settings (``HOST`` and ``PORT`` environment variables, defaults
``0.0.0.0`` and ``3000``).  It is intended to be executed from the
project root, for example under Docker, where you only specify a
single Python file to run.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
