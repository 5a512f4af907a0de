"""
Request and response schemas for routes.
"""
from app.schemas.auth import SignInForm, SignUpForm, SessionUser
from app.schemas.book import BookCreate, BookUpdate, BookResponse
from app.schemas.article import ArticleCreate, ArticleResponse
from app.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    SuggestionCreate,
    SuggestionResponse,
)

__all__ = [
    # Auth
    "SignInForm",
    "SignUpForm",
    "SessionUser",
    # Books
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Articles
    "ArticleCreate",
    "ArticleResponse",
    # Reviews
    "ReviewCreate",
    "ReviewResponse",
    "SuggestionCreate",
    "SuggestionResponse",
]
