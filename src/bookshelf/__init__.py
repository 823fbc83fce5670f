"""
Bookshelf
GraphQL API over an in-memory catalog of books and authors
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
