"""Pydantic records for the in-memory catalog."""

from pydantic import BaseModel, ConfigDict


class AuthorRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    age: int


class BookRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    genre: str
    author_id: str  # references AuthorRecord.id, not enforced
