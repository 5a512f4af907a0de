"""
Routers module.
"""
from app.routers import articles, auth, books, health, pages

__all__ = ["articles", "auth", "books", "health", "pages"]
