"""
Lookups over the in-memory catalog.

Every lookup is a linear scan over the stored sequence; nothing is indexed
and nothing is ever mutated.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from ..logging import get_logger
from .models import AuthorRecord, BookRecord
from .seed_data import AUTHORS, BOOKS

logger = get_logger(__name__)


class Catalog:
    """Immutable pair of book and author collections."""

    def __init__(self, books: Iterable[BookRecord], authors: Iterable[AuthorRecord]) -> None:
        self._books = tuple(books)
        self._authors = tuple(authors)

    def all_books(self) -> tuple[BookRecord, ...]:
        return self._books

    def all_authors(self) -> tuple[AuthorRecord, ...]:
        return self._authors

    def find_book(self, book_id: str | None) -> BookRecord | None:
        """Return the first book whose id matches, or None."""
        return next((book for book in self._books if book.id == book_id), None)

    def find_author(self, author_id: str | None) -> AuthorRecord | None:
        """Return the first author whose id matches, or None."""
        return next((author for author in self._authors if author.id == author_id), None)

    def author_of(self, book: BookRecord) -> AuthorRecord | None:
        """Return the author referenced by ``book.author_id``, or None if it dangles."""
        return self.find_author(book.author_id)

    def books_by(self, author: AuthorRecord) -> list[BookRecord]:
        """Return the author's books in stored order."""
        return self.books_by_author_id(author.id)

    def books_by_author_id(self, author_id: str) -> list[BookRecord]:
        return [book for book in self._books if book.author_id == author_id]

    def integrity_report(self) -> dict[str, Any]:
        """
        Report duplicate ids and dangling author references.

        Nothing here is enforced; lookups keep returning the first match and
        dangling references keep resolving to None.
        """
        results: dict[str, Any] = {
            "valid": True,
            "warnings": [],
            "duplicate_book_ids": _duplicates(book.id for book in self._books),
            "duplicate_author_ids": _duplicates(author.id for author in self._authors),
            "dangling_author_refs": [],
        }

        author_ids = {author.id for author in self._authors}
        for book in self._books:
            if book.author_id not in author_ids:
                results["dangling_author_refs"].append(
                    {"book_id": book.id, "author_id": book.author_id}
                )

        if results["duplicate_book_ids"]:
            results["warnings"].append(
                f"Duplicate book ids: {', '.join(results['duplicate_book_ids'])}"
            )
        if results["duplicate_author_ids"]:
            results["warnings"].append(
                f"Duplicate author ids: {', '.join(results['duplicate_author_ids'])}"
            )
        for ref in results["dangling_author_refs"]:
            results["warnings"].append(
                f"Book {ref['book_id']} references unknown author {ref['author_id']}"
            )

        results["valid"] = not results["warnings"]

        if results["valid"]:
            logger.debug(
                "Catalog integrity check passed",
                books=len(self._books),
                authors=len(self._authors),
            )
        else:
            logger.warning("Catalog integrity issues found", warnings=results["warnings"])

        return results


def _duplicates(ids: Iterable[str]) -> list[str]:
    counts = Counter(ids)
    return [value for value, count in counts.items() if count > 1]


# Process-lifetime catalog holding the hardcoded dataset
default_catalog = Catalog(BOOKS, AUTHORS)
