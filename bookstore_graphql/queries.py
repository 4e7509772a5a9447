"""GraphQL query resolvers."""

from typing import List, Optional

import strawberry

from .context import Context
from .types import Author, Book


def _unset_to_none(value):
    return None if value is strawberry.UNSET else value


@strawberry.type
class Query:
    """Root query."""

    @strawberry.field(description="single book")
    def book(
        self, info: strawberry.Info[Context, None], id: Optional[int] = strawberry.UNSET
    ) -> Optional[Book]:
        record = info.context.store.find_book(_unset_to_none(id))
        return Book.from_record(record) if record else None

    @strawberry.field(description="List of books")
    def books(self, info: strawberry.Info[Context, None]) -> Optional[List[Optional[Book]]]:
        return [Book.from_record(b) for b in info.context.store.books()]

    @strawberry.field(description="retrieve single author")
    def author(
        self, info: strawberry.Info[Context, None], id: Optional[int] = strawberry.UNSET
    ) -> Optional[Author]:
        record = info.context.store.find_author(_unset_to_none(id))
        return Author.from_record(record) if record else None

    @strawberry.field(description="List of all authors")
    def authors(self, info: strawberry.Info[Context, None]) -> Optional[List[Optional[Author]]]:
        return [Author.from_record(a) for a in info.context.store.authors()]
