"""
Articles router: community feed, JSON feed and the write form handler.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import PersistenceError, ValidationError
from app.database.connections import get_archive_db
from app.dependencies.session import CurrentUser
from app.schemas.article import ArticleCreate, ArticleResponse
from app.services.article_service import ArticleService
from app.views import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Articles"])


async def get_article_service(
    db: AsyncIOMotorDatabase = Depends(get_archive_db),
) -> ArticleService:
    """Dependency to get ArticleService instance."""
    return ArticleService(db)


@router.get("/articles", summary="Community articles page")
async def articles_page(
    request: Request,
    current_user: CurrentUser,
    article_service: ArticleService = Depends(get_article_service),
):
    """
    Render all community articles, newest first.
    
    A read failure is logged and the page renders with no articles.
    """
    try:
        community_articles = await article_service.list_articles()
    except PersistenceError:
        logger.exception("Error fetching articles")
        community_articles = []
    
    return render_page(
        request,
        "articles",
        "Articles",
        current_user,
        community_articles=community_articles,
    )


@router.get(
    "/api/articles",
    response_model=list[ArticleResponse],
    summary="Articles feed",
)
async def articles_feed(
    article_service: ArticleService = Depends(get_article_service),
):
    """All articles as JSON, newest first."""
    return await article_service.list_articles()


@router.post("/write", summary="Publish a community article")
async def write_article(
    form: Annotated[ArticleCreate, Form()],
    article_service: ArticleService = Depends(get_article_service),
):
    """
    Create an article from the write form.
    
    - **title**, **content**: required
    - **tag**, **author**, **read_time**, **excerpt**, **cover_image**: optional
    """
    try:
        await article_service.create_article(form)
    except ValidationError:
        return PlainTextResponse(
            "Title and content are required.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except PersistenceError:
        logger.exception("Error creating article")
        return PlainTextResponse(
            "Failed to publish article.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    
    return RedirectResponse("/articles", status_code=status.HTTP_303_SEE_OTHER)
