"""Entry point for running the Vidly API under Uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``).  Configuration such as
``JWT_PRIVATE_KEY`` and ``DATABASE_URL`` may be placed in the
environment before starting.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server


def main() -> None:
    """Build the app and serve it until interrupted."""
    from vidly_api.app.core.config import settings
    from vidly_api.app.main import app

    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    logging.getLogger(__name__).info("Listening on port %s...", settings.port)
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
