"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .book import Book


@strawberry.type(name="Author")
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str
    age: int

    @strawberry.field
    def book(self, info: strawberry.Info) -> list[Annotated["Book", strawberry.lazy(".book")]]:
        """Get the books written by this author, in catalog order."""
        from ..resolvers.author import resolve_author_books

        return resolve_author_books(self, info)
