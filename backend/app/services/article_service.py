"""
Community article service: submission and the public feed.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core.exceptions import PersistenceError, ValidationError
from app.database.databases import archive_db
from app.models.article import DEFAULT_AUTHOR, DEFAULT_READ_TIME, DEFAULT_TAG, Article
from app.schemas.article import ArticleCreate, ArticleResponse

logger = logging.getLogger(__name__)


def make_excerpt(content: str, length: int) -> str:
    """First `length` characters of the content followed by an ellipsis."""
    return content[:length] + "..."


class ArticleService:
    """Service for community articles."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the archive database."""
        self.db = db
        self.articles = db[archive_db.Collections.ARTICLES]
        self.settings = get_settings()

    async def create_article(self, request: ArticleCreate) -> ArticleResponse:
        """
        Publish a community article.

        Blank optional fields take their defaults; a missing excerpt is
        derived from the content.

        Raises:
            ValidationError: If title or content is blank
            PersistenceError: If the insert fails
        """
        title = (request.title or "").strip()
        content = request.content or ""
        if not title or not content.strip():
            raise ValidationError("Title and content are required.")

        article = Article(
            title=title,
            tag=request.tag or DEFAULT_TAG,
            author=request.author or DEFAULT_AUTHOR,
            read_time=request.read_time or DEFAULT_READ_TIME,
            excerpt=request.excerpt or make_excerpt(content, self.settings.excerpt_length),
            content=content,
            cover_image=request.cover_image or "",
        )
        article_doc = article.model_dump(exclude={"id"})

        try:
            result = await self.articles.insert_one(article_doc)
        except PyMongoError as e:
            raise PersistenceError("Failed to publish article.") from e

        article_doc["_id"] = result.inserted_id
        logger.info("Published article %s by %s", result.inserted_id, article.author)
        return self._article_to_response(article_doc)

    async def list_articles(self) -> list[ArticleResponse]:
        """List all articles, newest first."""
        try:
            cursor = self.articles.find({}).sort("created_at", -1)
            articles = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError("Error listing articles") from e

        return [self._article_to_response(doc) for doc in articles]

    def _article_to_response(self, doc: dict) -> ArticleResponse:
        """Convert MongoDB document to ArticleResponse."""
        article = Article(**{**doc, "_id": str(doc["_id"])})
        return ArticleResponse(**article.model_dump(exclude={"id"}), id=article.id)
