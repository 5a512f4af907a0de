"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with services bound to the
mock database and helpers for seeding collections.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(mock_archive_db, session_store):
    """AuthService over the mock database and fakeredis sessions."""
    from app.services.auth_service import AuthService
    return AuthService(mock_archive_db, session_store)


@pytest.fixture
def book_service(mock_archive_db):
    """BookService over the mock database."""
    from app.services.book_service import BookService
    return BookService(mock_archive_db)


@pytest.fixture
def article_service(mock_archive_db):
    """ArticleService over the mock database."""
    from app.services.article_service import ArticleService
    return ArticleService(mock_archive_db)


# =============================================================================
# Seeding Helpers
# =============================================================================

@pytest.fixture
def seed_books(mock_archive_db, timestamps):
    """
    Insert one book per timestamp, oldest first, titled "Book 0".."Book N".

    Returns the coroutine function; await it inside the test.
    """
    async def _seed():
        docs = [
            {"title": f"Book {i}", "description": f"Description {i}", "created_at": ts}
            for i, ts in enumerate(timestamps)
        ]
        await mock_archive_db.books.insert_many(docs)
        return docs
    return _seed


@pytest.fixture
def seed_articles(mock_archive_db, timestamps):
    """Insert one article per timestamp, oldest first, titled "Article 0".."Article N"."""
    async def _seed():
        docs = [
            {
                "title": f"Article {i}",
                "content": f"Body {i}",
                "excerpt": f"Body {i}...",
                "created_at": ts,
            }
            for i, ts in enumerate(timestamps)
        ]
        await mock_archive_db.articles.insert_many(docs)
        return docs
    return _seed


# =============================================================================
# Failure Injection
# =============================================================================

@pytest.fixture
def broken_collection():
    """
    A collection stand-in whose every call raises a PyMongo error.
    
    Assign it to a service attribute (e.g. `book_service.books`).
    """
    from unittest.mock import MagicMock
    from pymongo.errors import ServerSelectionTimeoutError

    error = ServerSelectionTimeoutError("no servers available")
    collection = MagicMock()
    collection.find.side_effect = error
    collection.find_one.side_effect = error
    collection.insert_one.side_effect = error
    collection.find_one_and_update.side_effect = error
    collection.delete_one.side_effect = error
    return collection


@pytest.fixture
def review_service(mock_archive_db):
    """ReviewService over the mock database."""
    from app.services.review_service import ReviewService
    return ReviewService(mock_archive_db)


@pytest.fixture
def reader():
    """A signed-in reader as stored in the session."""
    from app.schemas.auth import SessionUser
    return SessionUser(id="u1", email="ada@example.com", name="Ada Reader")
