"""Run the server: ``python -m bookstore_graphql``."""

import sys

import uvicorn
from loguru import logger

from .app import create_app
from .config import get_settings


def configure_logging(level: str) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level.upper())


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info(f"Starting GraphQL server on http://{settings.host}:{settings.port}/graphql")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
