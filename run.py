"""Entry point for the Soccer Results API.

This script serves the FastAPI application with uvicorn.  It is meant
to be executed from the project root, for example in a container where
you only specify a single Python file to run.

Configuration is read from environment variables: ``HOST`` and
``PORT`` for the server, and the variables documented in
``soccer_results_api.app.core.config`` for the application itself.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from soccer_results_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `HOST` and
    `PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    # log_config=None keeps uvicorn from replacing the handlers set up
    # by create_app.
    config = Config(app=app, host=host, port=port, reload=False, log_level="info", log_config=None)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
