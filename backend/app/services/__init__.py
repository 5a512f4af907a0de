"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.book_service import BookService
from app.services.article_service import ArticleService
from app.services.review_service import ReviewService
from app.services.session_store import SessionStore, RedisSessionStore

__all__ = [
    "AuthService",
    "BookService",
    "ArticleService",
    "ReviewService",
    "SessionStore",
    "RedisSessionStore",
]
