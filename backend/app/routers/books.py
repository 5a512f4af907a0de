"""
Books router: public catalog, reader reviews and suggestions, JSON feeds
and the admin CRUD surface.

Admin routes carry no access check; posting a review or suggestion
requires a signed-in user.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.database.connections import get_archive_db
from app.dependencies.session import CurrentUser
from app.schemas.book import BookCreate, BookResponse, BookUpdate
from app.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    SuggestionCreate,
    SuggestionResponse,
)
from app.services.book_service import BookService
from app.services.review_service import ReviewService
from app.views import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Books"])

ADMIN_BOOKS_URL = "/admin/books"
BOOKS_URL = "/books"


async def get_book_service(
    db: AsyncIOMotorDatabase = Depends(get_archive_db),
) -> BookService:
    """Dependency to get BookService instance."""
    return BookService(db)


async def get_review_service(
    db: AsyncIOMotorDatabase = Depends(get_archive_db),
) -> ReviewService:
    """Dependency to get ReviewService instance."""
    return ReviewService(db)


def _back_to_admin() -> RedirectResponse:
    return RedirectResponse(ADMIN_BOOKS_URL, status_code=status.HTTP_303_SEE_OTHER)


def _back_to_books() -> RedirectResponse:
    return RedirectResponse(BOOKS_URL, status_code=status.HTTP_303_SEE_OTHER)


def _to_signin() -> RedirectResponse:
    return RedirectResponse("/signin", status_code=status.HTTP_303_SEE_OTHER)


def _error(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


# ==================== Reads ====================


@router.get(BOOKS_URL, summary="Books page")
async def books_page(
    request: Request,
    current_user: CurrentUser,
    book_service: BookService = Depends(get_book_service),
    review_service: ReviewService = Depends(get_review_service),
):
    """Render the catalog newest first, each book's reviews and the suggestions box."""
    books = await book_service.list_books()
    reviews = await review_service.reviews_by_book([book.id for book in books])
    suggestions = await review_service.list_suggestions()
    return render_page(
        request,
        "books",
        "Books",
        current_user,
        books=books,
        reviews=reviews,
        suggestions=suggestions,
    )


@router.get(
    "/api/books",
    response_model=list[BookResponse],
    summary="Books feed",
)
async def books_feed(
    book_service: BookService = Depends(get_book_service),
):
    """The catalog as JSON, newest first."""
    return await book_service.list_books()


@router.get(
    "/api/books/suggestions",
    response_model=list[SuggestionResponse],
    summary="Suggestions feed",
)
async def suggestions_feed(
    review_service: ReviewService = Depends(get_review_service),
):
    """All book suggestions as JSON, newest first."""
    return await review_service.list_suggestions()


@router.get(
    "/api/books/{book_id}/reviews",
    response_model=list[ReviewResponse],
    summary="Reviews feed",
)
async def reviews_feed(
    book_id: str,
    review_service: ReviewService = Depends(get_review_service),
):
    """Reviews of one book as JSON, newest first."""
    return await review_service.list_reviews(book_id)


@router.get(ADMIN_BOOKS_URL, summary="Manage books page")
async def admin_books_page(
    request: Request,
    current_user: CurrentUser,
    book_service: BookService = Depends(get_book_service),
):
    """Render the management listing with create/edit/delete forms."""
    books = await book_service.list_books()
    return render_page(request, "admin-books", "Manage Books", current_user, books=books)


# ==================== Mutations ====================


@router.post(ADMIN_BOOKS_URL, summary="Create book")
async def create_book(
    form: Annotated[BookCreate, Form()],
    book_service: BookService = Depends(get_book_service),
):
    """
    Add a book to the catalog.
    
    - **title**, **description**: required
    - **image**: optional URL
    """
    try:
        await book_service.create_book(form)
    except ValidationError:
        return _error("Title and description are required.", status.HTTP_400_BAD_REQUEST)
    except PersistenceError:
        logger.exception("Error creating book")
        return _error("Error creating book", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _back_to_admin()


@router.post(ADMIN_BOOKS_URL + "/{book_id}/edit", summary="Update book")
async def update_book(
    book_id: str,
    form: Annotated[BookUpdate, Form()],
    book_service: BookService = Depends(get_book_service),
):
    """
    Update a book. An unknown id is logged and otherwise ignored.
    """
    try:
        await book_service.update_book(book_id, form)
    except NotFoundError:
        logger.warning("Update skipped, book %s not found", book_id)
    except ValidationError:
        return _error("Title and description cannot be blank.", status.HTTP_400_BAD_REQUEST)
    except PersistenceError:
        logger.exception("Error updating book %s", book_id)
        return _error("Error updating book", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _back_to_admin()


@router.post(ADMIN_BOOKS_URL + "/{book_id}/delete", summary="Delete book")
async def delete_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
):
    """Delete a book. Deleting an unknown id is a no-op."""
    try:
        deleted = await book_service.delete_book(book_id)
    except PersistenceError:
        logger.exception("Error deleting book %s", book_id)
        return _error("Error deleting book", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    if not deleted:
        logger.info("Delete of unknown book %s ignored", book_id)
    return _back_to_admin()


# ==================== Reader feedback ====================


@router.post(BOOKS_URL + "/{book_id}/reviews", summary="Review a book")
async def post_review(
    book_id: str,
    form: Annotated[ReviewCreate, Form()],
    current_user: CurrentUser,
    review_service: ReviewService = Depends(get_review_service),
):
    """
    Post a short review under a book. Signed-out readers are sent to sign in.
    
    - **text**: required
    """
    if current_user is None:
        return _to_signin()
    
    try:
        await review_service.add_review(book_id, form, current_user)
    except NotFoundError:
        logger.warning("Review skipped, book %s not found", book_id)
    except ValidationError:
        return _error("Please write a short review before posting.", status.HTTP_400_BAD_REQUEST)
    except PersistenceError:
        logger.exception("Error saving review on book %s", book_id)
        return _error("Error saving review", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _back_to_books()


@router.post(BOOKS_URL + "/suggestions", summary="Suggest a book")
async def post_suggestion(
    form: Annotated[SuggestionCreate, Form()],
    current_user: CurrentUser,
    review_service: ReviewService = Depends(get_review_service),
):
    """
    Add a title to the suggestions box. Signed-out readers are sent to sign in.
    
    - **text**: required
    """
    if current_user is None:
        return _to_signin()
    
    try:
        await review_service.add_suggestion(form, current_user)
    except ValidationError:
        return _error("Please type a book title to suggest.", status.HTTP_400_BAD_REQUEST)
    except PersistenceError:
        logger.exception("Error saving suggestion")
        return _error("Error saving suggestion", status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _back_to_books()
