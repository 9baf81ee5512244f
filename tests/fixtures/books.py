from __future__ import annotations

from typing import Any

import pytest

from bookstore.core.services import DbSessionService
from bookstore.entities.book import BookTable

__all__ = [
    "power_up",
    "new_book",
    "seeded_isbn",
]


@pytest.fixture
def power_up() -> dict[str, Any]:
    return {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "English",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    }


@pytest.fixture
def new_book() -> dict[str, Any]:
    return {
        "isbn": "1234567890",
        "amazon_url": "http://example.com/book",
        "author": "Jane Doe",
        "language": "French",
        "pages": 200,
        "publisher": "Example Publisher",
        "title": "New Book Title",
        "year": 2022,
    }


@pytest.fixture
def seeded_isbn(database_service: DbSessionService, power_up: dict[str, Any]) -> str:
    """Insert the Power-Up book straight into storage and return its isbn."""
    with database_service.session_scope() as db:
        db.add(BookTable(**power_up))
    return power_up["isbn"]
