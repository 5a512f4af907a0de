"""
Tests for /articles, /api/articles and the write form.
"""

import pytest
from unittest.mock import AsyncMock, patch

from app.core.exceptions import PersistenceError


class TestWriteRoute:

    @pytest.mark.asyncio
    async def test_write_form_renders(self, async_client):
        response = await async_client.get("/write")
        
        assert response.status_code == 200
        assert 'action="/write"' in response.text

    @pytest.mark.asyncio
    async def test_submission_redirects_to_articles(self, async_client, article_data):
        response = await async_client.post("/write", data=article_data)
        
        assert response.status_code == 303
        assert response.headers["location"] == "/articles"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"content": "Body only"},
        {"title": "Title only"},
        {"title": "", "content": ""},
    ])
    async def test_missing_title_or_content_returns_400(
        self, async_client, mock_archive_db, payload
    ):
        response = await async_client.post("/write", data=payload)
        
        assert response.status_code == 400
        assert response.text == "Title and content are required."
        assert await mock_archive_db.articles.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_persistence_failure_returns_500(self, async_client, article_data):
        with patch(
            "app.services.article_service.ArticleService.create_article",
            new=AsyncMock(side_effect=PersistenceError("down")),
        ):
            response = await async_client.post("/write", data=article_data)
        
        assert response.status_code == 500
        assert response.text == "Failed to publish article."


class TestArticleListing:

    @pytest.mark.asyncio
    async def test_feed_is_newest_first(self, async_client, seed_articles):
        await seed_articles()
        
        response = await async_client.get("/api/articles")
        
        assert response.status_code == 200
        data = response.json()
        assert [a["title"] for a in data] == ["Article 2", "Article 1", "Article 0"]
        assert {"id", "tag", "author", "read_time", "excerpt", "is_community"} <= set(data[0])

    @pytest.mark.asyncio
    async def test_submitted_article_appears_on_page_and_feed(self, async_client, article_data):
        await async_client.post("/write", data={**article_data, "author": "Jane Doe"})
        
        page = await async_client.get("/articles")
        feed = await async_client.get("/api/articles")
        
        assert page.status_code == 200
        assert article_data["title"] in page.text
        assert feed.json()[0]["author"] == "Jane Doe"

    @pytest.mark.asyncio
    async def test_page_renders_empty_when_store_fails(self, async_client):
        with patch(
            "app.services.article_service.ArticleService.list_articles",
            new=AsyncMock(side_effect=PersistenceError("down")),
        ):
            response = await async_client.get("/articles")
        
        assert response.status_code == 200
        assert "No community articles yet." in response.text

    @pytest.mark.asyncio
    async def test_feed_store_failure_returns_generic_500(self, async_client):
        with patch(
            "app.services.article_service.ArticleService.list_articles",
            new=AsyncMock(side_effect=PersistenceError("connection refused to 10.0.0.5")),
        ):
            response = await async_client.get("/api/articles")
        
        assert response.status_code == 500
        assert "10.0.0.5" not in response.text
