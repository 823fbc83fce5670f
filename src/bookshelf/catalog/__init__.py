"""In-memory catalog of books and authors."""

from .models import AuthorRecord, BookRecord
from .repository import Catalog, default_catalog

__all__ = ["AuthorRecord", "BookRecord", "Catalog", "default_catalog"]
