"""Records held by the in-memory store."""

from pydantic import BaseModel


class AuthorRecord(BaseModel):
    id: int
    name: str


class BookRecord(BaseModel):
    id: int
    name: str
    author_id: int
