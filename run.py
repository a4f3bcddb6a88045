"""Unified entry point for the employee store and the Employee Directory API.

This script launches the mock employee store and the public API
concurrently in one process.  It is intended to be executed from the
project root, for example under Docker, where you only specify a
single Python file to run.

Configuration (ports, store URL, seed size, rate limits) is read from
environment variables; see ``employee_directory/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from employee_directory.app.core.config import settings
from employee_directory.app.main import app as api_app
from employee_directory.mock_server.main import app as store_app


async def run_store() -> None:
    """Start the mock employee store using Uvicorn."""
    config = Config(
        app=store_app,
        host=settings.mock_server_host,
        port=settings.mock_server_port,
        reload=False,
        log_level="info",
    )
    server = Server(config)
    await server.serve()


async def run_api() -> None:
    """Start the Employee Directory API using Uvicorn."""
    config = Config(
        app=api_app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level="info",
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both services concurrently."""
    tasks = [asyncio.create_task(run_store()), asyncio.create_task(run_api())]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
