"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bookshelf.catalog import AuthorRecord, BookRecord, Catalog, default_catalog


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog


@pytest.fixture
def dangling_catalog() -> Catalog:
    """A catalog with a book pointing at an author that does not exist."""
    return Catalog(
        books=[
            BookRecord(id="10", name="Orphaned", genre="Mystery", author_id="404"),
            BookRecord(id="11", name="Claimed", genre="Mystery", author_id="7"),
        ],
        authors=[AuthorRecord(id="7", name="Ada Example", age=41)],
    )


@pytest.fixture
def mock_info(catalog: Catalog):
    """Create a mock GraphQL info object carrying the catalog in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "catalog": catalog}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
