"""Entry point for serving the User CRUD API.

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables; other settings (database path, log level) are
read by ``user_crud_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from user_crud_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    api_host = os.getenv("API_HOST", "0.0.0.0")
    api_port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=api_host, port=api_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
