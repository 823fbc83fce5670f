"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author


@strawberry.type(name="Book")
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    name: str
    genre: str
    author_id: str

    @strawberry.field
    def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:  # noqa: E501
        """Get the author of this book."""
        from ..resolvers.book import resolve_book_author

        return resolve_book_author(self, info)
