"""GraphQL context definitions."""

from fastapi import Request
from strawberry.fastapi import BaseContext

from .store import BookStore


class Context(BaseContext):
    """GraphQL context carrying the store the resolvers read and write."""

    def __init__(self, store: BookStore):
        super().__init__()
        self.store = store


async def get_context(request: Request) -> Context:
    """Build the context from the store attached to the application."""
    return Context(store=request.app.state.store)
