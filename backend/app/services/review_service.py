"""
Reader feedback service: reviews under each book and the suggestions box.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.database.databases import archive_db
from app.models.review import Review, Suggestion
from app.schemas.auth import SessionUser
from app.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    SuggestionCreate,
    SuggestionResponse,
)
from app.services.book_service import parse_object_id

logger = logging.getLogger(__name__)


def author_of(user: SessionUser) -> str:
    """Name shown next to a review or suggestion."""
    return user.name or user.email


class ReviewService:
    """Service for book reviews and suggestions."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the archive database."""
        self.db = db
        self.books = db[archive_db.Collections.BOOKS]
        self.reviews = db[archive_db.Collections.REVIEWS]
        self.suggestions = db[archive_db.Collections.SUGGESTIONS]

    # ==================== Reviews ====================

    async def add_review(
        self, book_id: str, request: ReviewCreate, user: SessionUser
    ) -> ReviewResponse:
        """
        Post a review under a book.

        Raises:
            NotFoundError: If no book has this id
            ValidationError: If the text is blank
            PersistenceError: If the database cannot be reached
        """
        oid = parse_object_id(book_id)
        if oid is None:
            raise NotFoundError(f"Book {book_id} not found")

        text = (request.text or "").strip()

        try:
            if not await self.books.find_one({"_id": oid}, {"_id": 1}):
                raise NotFoundError(f"Book {book_id} not found")
            if not text:
                raise ValidationError("Please write a short review before posting.")

            review = Review(book_id=str(oid), text=text, author=author_of(user))
            review_doc = review.model_dump(exclude={"id"})
            result = await self.reviews.insert_one(review_doc)
        except PyMongoError as e:
            raise PersistenceError("Error saving review") from e

        review_doc["_id"] = result.inserted_id
        logger.info("Review %s posted on book %s", result.inserted_id, book_id)
        return self._review_to_response(review_doc)

    async def list_reviews(self, book_id: str) -> list[ReviewResponse]:
        """Reviews of one book, newest first. Unknown books have none."""
        by_book = await self.reviews_by_book([book_id])
        return by_book[book_id]

    async def reviews_by_book(self, book_ids: list[str]) -> dict[str, list[ReviewResponse]]:
        """Reviews for each of `book_ids`, newest first, in a single query."""
        grouped = {book_id: [] for book_id in book_ids}
        if not book_ids:
            return grouped

        try:
            cursor = self.reviews.find({"book_id": {"$in": book_ids}}).sort("created_at", -1)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError("Error listing reviews") from e

        for doc in docs:
            grouped[doc["book_id"]].append(self._review_to_response(doc))
        return grouped

    # ==================== Suggestions ====================

    async def add_suggestion(
        self, request: SuggestionCreate, user: SessionUser
    ) -> SuggestionResponse:
        """
        Suggest a book for the catalog.

        Raises:
            ValidationError: If the text is blank
            PersistenceError: If the insert fails
        """
        text = (request.text or "").strip()
        if not text:
            raise ValidationError("Please type a book title to suggest.")

        suggestion = Suggestion(text=text, author=author_of(user))
        suggestion_doc = suggestion.model_dump(exclude={"id"})

        try:
            result = await self.suggestions.insert_one(suggestion_doc)
        except PyMongoError as e:
            raise PersistenceError("Error saving suggestion") from e

        suggestion_doc["_id"] = result.inserted_id
        logger.info("Suggestion %s posted", result.inserted_id)
        return self._suggestion_to_response(suggestion_doc)

    async def list_suggestions(self) -> list[SuggestionResponse]:
        """All suggestions, newest first."""
        try:
            cursor = self.suggestions.find({}).sort("created_at", -1)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError("Error listing suggestions") from e

        return [self._suggestion_to_response(doc) for doc in docs]

    def _review_to_response(self, doc: dict) -> ReviewResponse:
        review = Review(**{**doc, "_id": str(doc["_id"])})
        return ReviewResponse(**review.model_dump(exclude={"id"}), id=review.id)

    def _suggestion_to_response(self, doc: dict) -> SuggestionResponse:
        suggestion = Suggestion(**{**doc, "_id": str(doc["_id"])})
        return SuggestionResponse(**suggestion.model_dump(exclude={"id"}), id=suggestion.id)
