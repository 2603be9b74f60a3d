"""
Run the Quest API with uvicorn.

Usage:
    python -m quest_api
    quest-api

HOST, PORT and LOG_LEVEL are read from the environment (see settings.py).
"""
from __future__ import annotations

import logging
import sys

import uvicorn

from .main import app
from .settings import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


# PUBLIC_INTERFACE
def main() -> None:
    """Configure logging and serve the application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting Quest API on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
