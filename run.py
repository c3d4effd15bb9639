"""Entry point for the Product API.

Starts the FastAPI application under uvicorn.  Host and port come from
``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``); the
rest of the configuration is read from the environment by
``product_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_api.app.core.config import settings
from product_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Product API terminated with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
