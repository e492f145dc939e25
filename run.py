"""Entry point for the User Records API.

Starts the FastAPI application under Uvicorn.  Intended to be executed
from the project root, e.g. in a container where you only specify a
single Python file to run.

Host and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``).  DynamoDB connection settings are
read by ``user_records_api.app.core.config``.  Uvicorn logs the bound
address once the socket is open; the app logs when table bootstrap is done.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from user_records_api.app.core.config import settings
from user_records_api.app.main import app


async def main() -> None:
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
