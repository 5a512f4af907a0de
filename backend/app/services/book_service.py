"""
Book catalog service for the admin CRUD surface.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.database.databases import archive_db
from app.models.book import Book
from app.schemas.book import BookCreate, BookResponse, BookUpdate

logger = logging.getLogger(__name__)


def parse_object_id(book_id: str) -> Optional[ObjectId]:
    """Parse a book id, returning None when it cannot be an ObjectId."""
    try:
        return ObjectId(book_id)
    except (InvalidId, TypeError):
        return None


class BookService:
    """Service for book catalog operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the archive database."""
        self.db = db
        self.books = db[archive_db.Collections.BOOKS]

    async def create_book(self, request: BookCreate) -> BookResponse:
        """
        Add a book to the catalog.

        Raises:
            ValidationError: If title or description is blank
            PersistenceError: If the insert fails
        """
        title = (request.title or "").strip()
        description = (request.description or "").strip()
        if not title or not description:
            raise ValidationError("Title and description are required")

        book = Book(title=title, description=description, image=request.image or None)
        book_doc = book.model_dump(exclude={"id"})

        try:
            result = await self.books.insert_one(book_doc)
        except PyMongoError as e:
            raise PersistenceError("Error creating book") from e

        book_doc["_id"] = result.inserted_id
        logger.info("Created book %s", result.inserted_id)
        return self._book_to_response(book_doc)

    async def list_books(self) -> list[BookResponse]:
        """List all books, newest first."""
        try:
            cursor = self.books.find({}).sort("created_at", -1)
            books = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError("Error listing books") from e

        return [self._book_to_response(doc) for doc in books]

    async def get_book(self, book_id: str) -> BookResponse:
        """
        Get a book by ID.

        Raises:
            NotFoundError: If no book has this id
        """
        oid = parse_object_id(book_id)
        if oid is None:
            raise NotFoundError(f"Book {book_id} not found")

        try:
            book_doc = await self.books.find_one({"_id": oid})
        except PyMongoError as e:
            raise PersistenceError("Error reading book") from e

        if not book_doc:
            raise NotFoundError(f"Book {book_id} not found")

        return self._book_to_response(book_doc)

    async def update_book(self, book_id: str, request: BookUpdate) -> BookResponse:
        """
        Update the supplied fields of a book.

        Raises:
            NotFoundError: If no book has this id, checked first
            ValidationError: If title or description is supplied blank
            PersistenceError: If the update fails
        """
        oid = parse_object_id(book_id)
        if oid is None:
            raise NotFoundError(f"Book {book_id} not found")

        # An unknown id wins over blank fields
        try:
            existing = await self.books.find_one({"_id": oid}, {"_id": 1})
        except PyMongoError as e:
            raise PersistenceError("Error updating book") from e
        if not existing:
            raise NotFoundError(f"Book {book_id} not found")

        update_data = {k: v for k, v in request.model_dump().items() if v is not None}

        for field in ("title", "description"):
            if field in update_data:
                update_data[field] = update_data[field].strip()
                if not update_data[field]:
                    raise ValidationError(f"Book {field} cannot be blank")

        if not update_data:
            return await self.get_book(book_id)

        try:
            result = await self.books.find_one_and_update(
                {"_id": oid},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise PersistenceError("Error updating book") from e

        if not result:
            raise NotFoundError(f"Book {book_id} not found")

        return self._book_to_response(result)

    async def delete_book(self, book_id: str) -> bool:
        """
        Delete a book.

        Deleting an unknown id is a no-op.

        Returns:
            True if a book was removed
        """
        oid = parse_object_id(book_id)
        if oid is None:
            return False

        try:
            result = await self.books.delete_one({"_id": oid})
        except PyMongoError as e:
            raise PersistenceError("Error deleting book") from e

        return result.deleted_count > 0

    def _book_to_response(self, doc: dict) -> BookResponse:
        """Convert MongoDB document to BookResponse."""
        book = Book(**{**doc, "_id": str(doc["_id"])})
        return BookResponse(
            id=book.id,
            title=book.title,
            description=book.description,
            image=book.image,
            created_at=book.created_at,
        )
