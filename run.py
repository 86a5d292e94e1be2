"""Entry point for the registration API server.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``5000``); see ``mun_registration_api.app.core.config``
for the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from mun_registration_api.app.core.config import settings
from mun_registration_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
