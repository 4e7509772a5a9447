"""In-memory entity store for authors and books."""

import threading
from typing import Dict, Iterable, List, Optional

from loguru import logger

from .models import AuthorRecord, BookRecord


class BookStore:
    """Two ordered, append-only sequences of authors and books.

    New records get ``id = len(sequence) + 1``. Records are never removed,
    so ids stay unique as long as the seed data is numbered 1..n.
    """

    def __init__(
        self,
        authors: Iterable[AuthorRecord] = (),
        books: Iterable[BookRecord] = (),
    ):
        self._lock = threading.Lock()
        self._authors: List[AuthorRecord] = []
        self._books: List[BookRecord] = []
        # first record per id, same answer as a linear scan
        self._authors_by_id: Dict[int, AuthorRecord] = {}
        self._books_by_id: Dict[int, BookRecord] = {}

        for author in authors:
            self._append_author(author)
        for book in books:
            self._append_book(book)

    # --- Reads ---

    def authors(self) -> List[AuthorRecord]:
        with self._lock:
            return list(self._authors)

    def books(self) -> List[BookRecord]:
        with self._lock:
            return list(self._books)

    def find_author(self, author_id: Optional[int]) -> Optional[AuthorRecord]:
        if author_id is None:
            return None
        author = self._authors_by_id.get(author_id)
        if author is None:
            logger.debug(f"No author with id {author_id}")
        return author

    def find_book(self, book_id: Optional[int]) -> Optional[BookRecord]:
        if book_id is None:
            return None
        book = self._books_by_id.get(book_id)
        if book is None:
            logger.debug(f"No book with id {book_id}")
        return book

    def books_by_author(self, author_id: int) -> List[BookRecord]:
        with self._lock:
            return [b for b in self._books if b.author_id == author_id]

    # --- Writes ---

    def add_author(self, name: str) -> AuthorRecord:
        with self._lock:
            author = AuthorRecord(id=len(self._authors) + 1, name=name)
            self._append_author(author)
        logger.info(f"Added author {author.id}: {author.name!r}")
        return author

    def add_book(self, name: str, author_id: int) -> BookRecord:
        # author_id is not checked against the known authors
        with self._lock:
            book = BookRecord(id=len(self._books) + 1, name=name, author_id=author_id)
            self._append_book(book)
        logger.info(f"Added book {book.id}: {book.name!r} (author {book.author_id})")
        return book

    def _append_author(self, author: AuthorRecord) -> None:
        self._authors.append(author)
        self._authors_by_id.setdefault(author.id, author)

    def _append_book(self, book: BookRecord) -> None:
        self._books.append(book)
        self._books_by_id.setdefault(book.id, book)

    def __repr__(self) -> str:
        return f"BookStore(authors={len(self._authors)}, books={len(self._books)})"
