from typing import Optional

import requests


class APIClient:
    """Simple API client for the archive's JSON feeds."""
    
    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
    
    def _parse_json(self, resp) -> Optional[object]:
        """Safely parse JSON, return None or text on failure."""
        try:
            if resp is None or not resp.text:
                return None
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        """Make GET request."""
        try:
            resp = requests.get(
                f"{self.base_url}{endpoint}",
                headers={"Accept": "application/json"},
                params=params or {},
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}
    
    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")
    
    # Feeds
    def list_articles(self) -> dict:
        """All articles, newest first."""
        return self._get("/api/articles")
    
    def list_books(self) -> dict:
        """All books, newest first."""
        return self._get("/api/books")
    
    def list_suggestions(self) -> dict:
        """Reader book suggestions, newest first."""
        return self._get("/api/books/suggestions")
    
    def list_reviews(self, book_id: str) -> dict:
        """Reviews of one book, newest first."""
        return self._get(f"/api/books/{book_id}/reviews")
