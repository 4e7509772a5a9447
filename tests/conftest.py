"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from bookstore_graphql.app import create_app
from bookstore_graphql.config import Settings
from bookstore_graphql.context import Context
from bookstore_graphql.fixtures import create_store
from bookstore_graphql.models import AuthorRecord, BookRecord
from bookstore_graphql.schema import schema
from bookstore_graphql.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """Store seeded with the default fixture data."""
    return create_store()


@pytest.fixture
def small_store() -> BookStore:
    """One author, one book."""
    return BookStore(
        authors=[AuthorRecord(id=1, name="J")],
        books=[BookRecord(id=1, name="Foo", author_id=1)],
    )


@pytest.fixture
def execute(store):
    """Run a GraphQL document against ``store`` and return the result."""

    def _execute(query, variables=None, target=None):
        return schema.execute_sync(
            query,
            variable_values=variables,
            context_value=Context(store=target or store),
        )

    return _execute


@pytest.fixture
def client(store) -> TestClient:
    app = create_app(Settings(), store=store)
    return TestClient(app)
