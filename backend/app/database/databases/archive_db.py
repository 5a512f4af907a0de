"""
Archive database configuration.
Stores accounts, the book catalog with its reviews and suggestions,
and community articles.
"""


class Collections:
    """Collection names in the archive database."""
    USERS = "users"
    BOOKS = "books"
    ARTICLES = "articles"
    REVIEWS = "reviews"
    SUGGESTIONS = "suggestions"


# Indexes created on startup: (collection, keys, options)
INDEXES = [
    # Lookup only: signup uniqueness is a read-then-write check
    (Collections.USERS, [("email", 1)], {}),
    (Collections.BOOKS, [("created_at", -1)], {}),
    (Collections.ARTICLES, [("created_at", -1)], {}),
    (Collections.REVIEWS, [("book_id", 1), ("created_at", -1)], {}),
    (Collections.SUGGESTIONS, [("created_at", -1)], {}),
]
