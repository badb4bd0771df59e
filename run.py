"""Entry point for the Smart Deals API server.

Starts the FastAPI application with Uvicorn.  Host, port and the
MongoDB connection are read from environment variables (or a ``.env``
file in the working directory); see ``smart_deals_api.app.core.config``
for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from smart_deals_api.app.core.config import settings
from smart_deals_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info(
        "Smart Deals Server is running on port: %s", settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
