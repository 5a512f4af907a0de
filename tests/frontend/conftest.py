"""
Frontend test fixtures.

Feed items shaped like the /api/articles and /api/books responses, and
canned API client results.
"""
import pytest


@pytest.fixture
def sample_articles():
    """Articles as returned by the feed, newest first."""
    return [
        {
            "id": "a1",
            "title": "Zen",
            "tag": "Culture",
            "author": "Mika",
            "read_time": "4 min read",
            "excerpt": "Sitting still in a loud city...",
            "created_at": "2025-01-03T09:00:00Z",
        },
        {
            "id": "a2",
            "title": "Food Diary",
            "tag": "Food",
            "author": "Anonymous",
            "read_time": "3 min read",
            "excerpt": "Seven days of miso soup...",
            "created_at": "2025-01-02T09:00:00Z",
        },
        {
            "id": "a3",
            "title": "Quarterly Letter",
            "tag": "Business Essay",
            "author": "Ren",
            "read_time": "6 min read",
            "excerpt": "What a small shop learns about patience...",
            "created_at": "2025-01-01T09:00:00Z",
        },
    ]


@pytest.fixture
def sample_books():
    """Books as returned by the feed."""
    return [
        {
            "id": "b1",
            "title": "The Way of Nagomi",
            "description": "Effortless balance in everyday life.",
            "image": None,
            "created_at": "2025-01-02T00:00:00Z",
        },
        {
            "id": "b2",
            "title": "Ikigai",
            "description": "A reason for being.",
            "image": "https://example.com/ikigai.jpg",
            "created_at": "2025-01-01T00:00:00Z",
        },
    ]


@pytest.fixture
def mock_api_responses(sample_articles, sample_books):
    """Common API response fixtures."""
    return {
        "health_ok": {"status": 200, "data": {"status": "healthy"}},
        "articles": {"status": 200, "data": sample_articles},
        "books": {"status": 200, "data": sample_books},
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }
