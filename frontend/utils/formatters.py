"""
Formatting helpers for the reader views.
"""
from datetime import datetime


def format_date(date_str: str, fmt: str = "%d %b %Y") -> str:
    """Format ISO date string for display."""
    try:
        if not date_str:
            return "-"
        dt = datetime.fromisoformat(date_str.replace('Z', '+00:00'))
        return dt.strftime(fmt)
    except (TypeError, ValueError):
        return "-"


def format_byline(article: dict) -> str:
    """'by Author · 3 min read', skipping missing parts."""
    parts = []
    if article.get("author"):
        parts.append(f"by {article['author']}")
    if article.get("read_time"):
        parts.append(article["read_time"])
    return " · ".join(parts)


def format_result_count(shown: int, total: int) -> str:
    """Summary line above a filtered list."""
    if shown == total:
        return f"{total} item{'s' if total != 1 else ''}"
    return f"{shown} of {total} items"
