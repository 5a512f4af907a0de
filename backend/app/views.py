"""
Server-side page rendering.

Every page renders the shared layout, which includes the page fragment
named by `page` and receives the signed-in user as `current_user`.
"""
from pathlib import Path
from typing import Any, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.schemas.auth import SessionUser

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(
    request: Request,
    page: str,
    page_title: str,
    current_user: Optional[SessionUser] = None,
    **context: Any,
):
    """Render `pages/<page>.html` inside the layout."""
    return templates.TemplateResponse(
        request,
        "layout.html",
        {
            "page": page,
            "page_title": page_title,
            "current_user": current_user,
            **context,
        },
    )
