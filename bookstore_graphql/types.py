"""GraphQL object types.

``Author`` and ``Book`` reference each other. The ``"Book"`` annotation on
``Author.books`` is a forward reference that strawberry resolves once both
classes exist.
"""

from typing import List, Optional

import strawberry

from .context import Context
from .models import AuthorRecord, BookRecord


@strawberry.type(description="Author of a book")
class Author:
    id: int
    name: str

    @strawberry.field
    def books(self, info: strawberry.Info[Context, None]) -> Optional[List[Optional["Book"]]]:
        return [Book.from_record(b) for b in info.context.store.books_by_author(self.id)]

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=record.id, name=record.name)


@strawberry.type(description="Book written by an author")
class Book:
    id: int
    name: str
    author_id: int

    @strawberry.field
    def author(self, info: strawberry.Info[Context, None]) -> Optional[Author]:
        # dangling author_id resolves to null
        record = info.context.store.find_author(self.author_id)
        return Author.from_record(record) if record else None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=record.id, name=record.name, author_id=record.author_id)
