"""
Tests for posting reviews and suggestions from the books page.

Both are open to signed-in readers only; signed-out posts redirect
to /signin and store nothing.
"""

import pytest
from bson import ObjectId
from unittest.mock import AsyncMock, patch

from app.core.exceptions import PersistenceError


@pytest.fixture
def signed_in(async_client, signup_data):
    """Sign the async client up; await it inside the test."""
    async def _sign_in():
        response = await async_client.post("/signup", data=signup_data)
        assert response.status_code == 303
    return _sign_in


class TestPostReview:

    @pytest.mark.asyncio
    async def test_signed_out_review_redirects_to_signin(
        self, async_client, mock_archive_db, seed_books
    ):
        docs = await seed_books()
        
        response = await async_client.post(
            f"/books/{docs[0]['_id']}/reviews", data={"text": "Lovely"}
        )
        
        assert response.status_code == 303
        assert response.headers["location"] == "/signin"
        assert await mock_archive_db.reviews.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_review_appears_on_books_page(self, async_client, seed_books, signed_in):
        docs = await seed_books()
        await signed_in()
        
        response = await async_client.post(
            f"/books/{docs[0]['_id']}/reviews", data={"text": "A slow, kind book."}
        )
        
        assert response.status_code == 303
        assert response.headers["location"] == "/books"
        page = await async_client.get("/books")
        assert "A slow, kind book." in page.text
        assert "Ada Reader" in page.text

    @pytest.mark.asyncio
    async def test_review_feed(self, async_client, seed_books, signed_in):
        docs = await seed_books()
        book_id = str(docs[0]["_id"])
        await signed_in()
        await async_client.post(f"/books/{book_id}/reviews", data={"text": "First"})
        await async_client.post(f"/books/{book_id}/reviews", data={"text": "Second"})
        
        response = await async_client.get(f"/api/books/{book_id}/reviews")
        
        assert response.status_code == 200
        texts = [r["text"] for r in response.json()]
        assert sorted(texts) == ["First", "Second"]
        assert all(r["book_id"] == book_id for r in response.json())

    @pytest.mark.asyncio
    async def test_blank_review_returns_400(self, async_client, mock_archive_db, seed_books, signed_in):
        docs = await seed_books()
        await signed_in()
        
        response = await async_client.post(f"/books/{docs[0]['_id']}/reviews", data={"text": " "})
        
        assert response.status_code == 400
        assert response.text == "Please write a short review before posting."
        assert await mock_archive_db.reviews.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_review_on_unknown_book_redirects_without_storing(
        self, async_client, mock_archive_db, signed_in
    ):
        await signed_in()
        
        response = await async_client.post(f"/books/{ObjectId()}/reviews", data={"text": "Hi"})
        
        assert response.status_code == 303
        assert response.headers["location"] == "/books"
        assert await mock_archive_db.reviews.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_persistence_failure_returns_500(self, async_client, signed_in):
        await signed_in()
        with patch(
            "app.services.review_service.ReviewService.add_review",
            new=AsyncMock(side_effect=PersistenceError("down")),
        ):
            response = await async_client.post(f"/books/{ObjectId()}/reviews", data={"text": "Hi"})
        
        assert response.status_code == 500
        assert response.text == "Error saving review"


class TestPostSuggestion:

    @pytest.mark.asyncio
    async def test_signed_out_suggestion_redirects_to_signin(self, async_client, mock_archive_db):
        response = await async_client.post("/books/suggestions", data={"text": "Ikigai"})
        
        assert response.status_code == 303
        assert response.headers["location"] == "/signin"
        assert await mock_archive_db.suggestions.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_suggestion_appears_on_page_and_feed(self, async_client, signed_in):
        await signed_in()
        
        response = await async_client.post("/books/suggestions", data={"text": "Ikigai"})
        
        assert response.status_code == 303
        assert response.headers["location"] == "/books"
        page = await async_client.get("/books")
        assert "Ikigai" in page.text
        feed = await async_client.get("/api/books/suggestions")
        assert [(s["text"], s["author"]) for s in feed.json()] == [("Ikigai", "Ada Reader")]

    @pytest.mark.asyncio
    async def test_blank_suggestion_returns_400(self, async_client, signed_in):
        await signed_in()
        
        response = await async_client.post("/books/suggestions", data={"text": "  "})
        
        assert response.status_code == 400
        assert response.text == "Please type a book title to suggest."


class TestBooksPageFeedback:

    @pytest.mark.asyncio
    async def test_signed_out_page_offers_sign_in_instead_of_forms(self, async_client, seed_books):
        await seed_books()
        
        response = await async_client.get("/books")
        
        assert response.status_code == 200
        assert "No reviews yet." in response.text
        assert "No suggestions yet. Be the first!" in response.text
        assert 'action="/books/suggestions"' not in response.text
        assert "to suggest a book." in response.text

    @pytest.mark.asyncio
    async def test_signed_in_page_shows_forms(self, async_client, seed_books, signed_in):
        docs = await seed_books()
        await signed_in()
        
        response = await async_client.get("/books")
        
        assert 'action="/books/suggestions"' in response.text
        assert f'action="/books/{docs[0]["_id"]}/reviews"' in response.text
