"""Entry point for serving the Zoo API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``zoo_api.app.core.config``).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from zoo_api.app.core.config import settings
from zoo_api.app.main import app


def main() -> None:
    """Serve the application with Uvicorn until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    try:
        server.run()
    except Exception:
        logging.exception("Zoo API terminated with an error")
        raise


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
