"""FastAPI application exposing the GraphQL endpoint."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from . import __version__
from .config import Settings, get_settings
from .fixtures import create_store
from .schema import create_graphql_router
from .store import BookStore


def create_app(
    settings: Optional[Settings] = None, store: Optional[BookStore] = None
) -> FastAPI:
    """Build the application around ``store``.

    When no store is given a fresh one is created, seeded according to
    ``settings.seed_fixtures``.
    """
    settings = settings or get_settings()
    if store is None:
        store = create_store(seed=settings.seed_fixtures)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Serving {app.state.store!r} on port {settings.port}")
        yield
        logger.info("Server shutting down...")

    app = FastAPI(
        title="Bookstore GraphQL API",
        description="GraphQL API over an in-memory collection of authors and books",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    @app.get("/")
    def root():
        return settings.greeting

    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="/graphql")
    return app


app = create_app()
