"""Seed data loaded into the store at startup."""

from .models import AuthorRecord, BookRecord
from .store import BookStore

AUTHORS = [
    {"id": 1, "name": "J. K. Rowling"},
    {"id": 2, "name": "J. R. R. Tolkien"},
    {"id": 3, "name": "Brent Weeks"},
]

BOOKS = [
    {"id": 1, "name": "Harry Potter and the Chamber of Secrets", "author_id": 1},
    {"id": 2, "name": "Harry Potter and the Prisoner of Azkaban", "author_id": 1},
    {"id": 3, "name": "Harry Potter and the Goblet of Fire", "author_id": 1},
    {"id": 4, "name": "The Fellowship of the Ring", "author_id": 2},
    {"id": 5, "name": "The Two Towers", "author_id": 2},
    {"id": 6, "name": "The Return of the King", "author_id": 2},
    {"id": 7, "name": "The Way of Shadows", "author_id": 3},
    {"id": 8, "name": "Beyond the Shadows", "author_id": 3},
]


def create_store(seed: bool = True) -> BookStore:
    """Build a store, optionally seeded with the fixture data.

    Malformed fixture entries raise ``pydantic.ValidationError``.
    """
    if not seed:
        return BookStore()
    return BookStore(
        authors=[AuthorRecord(**a) for a in AUTHORS],
        books=[BookRecord(**b) for b in BOOKS],
    )
