"""
Pydantic models for database documents.
"""
from app.models.user import User
from app.models.book import Book
from app.models.article import Article
from app.models.review import Review, Suggestion

__all__ = [
    "User",
    "Book",
    "Article",
    "Review",
    "Suggestion",
]
