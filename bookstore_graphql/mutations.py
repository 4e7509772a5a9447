"""GraphQL mutations."""

from typing import Optional

import strawberry
from loguru import logger

from .context import Context
from .types import Author, Book


@strawberry.type
class Mutation:
    """Root mutation."""

    @strawberry.mutation(description="add book to the database")
    def add_book(
        self, info: strawberry.Info[Context, None], name: str, author_id: int
    ) -> Optional[Book]:
        record = info.context.store.add_book(name=name, author_id=author_id)
        return Book.from_record(record)

    @strawberry.mutation(description="add author to the database")
    def add_author(
        self, info: strawberry.Info[Context, None], name: str, author_id: int
    ) -> Optional[Author]:
        # authorId is part of the published contract but has no meaning for
        # an author record; it is accepted and dropped.
        logger.debug(f"addAuthor ignoring authorId={author_id}")
        record = info.context.store.add_author(name=name)
        return Author.from_record(record)
