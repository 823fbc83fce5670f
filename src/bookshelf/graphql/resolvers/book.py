from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog import BookRecord
from ...logging import get_logger
from ..context import get_catalog_from_info

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def book_from_record(record: BookRecord) -> Book:
    """Convert a catalog record to the GraphQL type."""
    from ..types.book import Book as BookType

    return BookType(
        id=strawberry.ID(record.id),
        name=record.name,
        genre=record.genre,
        author_id=record.author_id,
    )


# Query resolvers
def resolve_book_by_id(info: strawberry.Info, id: str | None) -> Book | None:
    """Resolve the first book with a matching id."""
    record = get_catalog_from_info(info).find_book(id)
    if record is None:
        logger.debug("Book not found", book_id=id)
        return None
    return book_from_record(record)


def resolve_books(info: strawberry.Info) -> list[Book]:
    return [book_from_record(record) for record in get_catalog_from_info(info).all_books()]


# Book field resolvers
def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """
    Resolve the author referenced by the book's author_id.

    A dangling reference resolves to None rather than an error.
    """
    record = get_catalog_from_info(info).find_author(book.author_id)
    if record is None:
        logger.debug("Author not found for book", book_id=book.id, author_id=book.author_id)
        return None

    from .author import author_from_record

    return author_from_record(record)
