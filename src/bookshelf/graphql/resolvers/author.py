from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog import AuthorRecord
from ...logging import get_logger
from ..context import get_catalog_from_info
from .book import book_from_record

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def author_from_record(record: AuthorRecord) -> Author:
    """Convert a catalog record to the GraphQL type."""
    from ..types.author import Author as AuthorType

    return AuthorType(id=strawberry.ID(record.id), name=record.name, age=record.age)


# Query resolvers
def resolve_author_by_id(info: strawberry.Info, id: str | None) -> Author | None:
    """Resolve the first author with a matching id."""
    record = get_catalog_from_info(info).find_author(id)
    if record is None:
        logger.debug("Author not found", author_id=id)
        return None
    return author_from_record(record)


def resolve_authors(info: strawberry.Info) -> list[Author]:
    return [author_from_record(record) for record in get_catalog_from_info(info).all_authors()]


# Author field resolvers
def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the author's books, preserving catalog order."""
    records = get_catalog_from_info(info).books_by_author_id(author.id)
    return [book_from_record(record) for record in records]
