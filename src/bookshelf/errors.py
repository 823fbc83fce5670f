"""Exceptions raised by the Bookshelf application."""


class BookshelfError(Exception):
    """Base class for Bookshelf errors."""

    pass


class SchemaValidationError(BookshelfError):
    """Raised when the GraphQL schema fails validation at startup."""

    pass
