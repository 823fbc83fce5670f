"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type(name="RootQuery")
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def book(self, info: strawberry.Info, id: strawberry.ID | None = None) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return resolve_book_by_id(info, id)

    @strawberry.field
    def author(self, info: strawberry.Info, id: strawberry.ID | None = None) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.author import resolve_author_by_id

        return resolve_author_by_id(info, id)

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book]:
        """Get every book in catalog order."""
        from ..resolvers.book import resolve_books

        return resolve_books(info)

    @strawberry.field
    def authors(self, info: strawberry.Info) -> list[Author]:
        """Get every author in catalog order."""
        from ..resolvers.author import resolve_authors

        return resolve_authors(info)
