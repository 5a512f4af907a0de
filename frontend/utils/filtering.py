"""
List filtering for the reader views.

State is an immutable FilterState; every user event is an action passed
through `reduce`. Nothing here touches Streamlit, so the views own the
wiring and the logic stays testable.
"""
import html
import re
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence, Union

ALL = "All"
CATEGORIES = (ALL, "Culture", "Food", "Business", "Technology")

ARTICLE_SEARCH_FIELDS = ("title", "excerpt", "author")
BOOK_SEARCH_FIELDS = ("title", "description")


@dataclass(frozen=True)
class FilterState:
    """Free-text query, active category and locally subscribed item ids."""
    query: str = ""
    category: str = ALL
    subscriptions: frozenset = field(default_factory=frozenset)

    def is_subscribed(self, item_id) -> bool:
        return str(item_id) in self.subscriptions


# ==================== Actions ====================


@dataclass(frozen=True)
class SetQuery:
    text: str


@dataclass(frozen=True)
class SetCategory:
    name: str


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ToggleSubscription:
    item_id: str


Action = Union[SetQuery, SetCategory, Clear, ToggleSubscription]


def reduce(state: FilterState, action: Action) -> FilterState:
    """Return the state that follows `action`."""
    if isinstance(action, SetQuery):
        return replace(state, query=(action.text or "").strip())
    if isinstance(action, SetCategory):
        return replace(state, category=(action.name or "").strip() or ALL)
    if isinstance(action, Clear):
        # Subscriptions survive a cleared search
        return replace(state, query="", category=ALL)
    if isinstance(action, ToggleSubscription):
        item_id = str(action.item_id)
        if item_id in state.subscriptions:
            return replace(state, subscriptions=state.subscriptions - {item_id})
        return replace(state, subscriptions=state.subscriptions | {item_id})
    raise TypeError(f"Unknown filter action: {action!r}")


# ==================== Selection ====================


def matches_category(item: dict, category: str) -> bool:
    """Case-insensitive substring match of the category in the item's tag."""
    if not category or category == ALL:
        return True
    tag = item.get("tag") or ""
    return category.lower() in tag.lower()


def matches_query(item: dict, query: str, fields: Sequence[str] = ARTICLE_SEARCH_FIELDS) -> bool:
    """Case-insensitive substring match of the query in the joined search fields."""
    q = (query or "").strip().lower()
    if not q:
        return True
    combined = " ".join(str(item.get(f) or "") for f in fields).lower()
    return q in combined


def filter_items(
    state: FilterState,
    items: Iterable[dict],
    fields: Sequence[str] = ARTICLE_SEARCH_FIELDS,
) -> list[dict]:
    """Items matching both the active category and the query, in input order."""
    return [
        item for item in items
        if matches_category(item, state.category) and matches_query(item, state.query, fields)
    ]


def highlight(text: str, query: str) -> str:
    """
    HTML-escape `text` and wrap every case-insensitive match of `query`
    in `<span class="highlight">`.
    """
    text = text or ""
    q = (query or "").strip()
    if not q:
        return html.escape(text)

    pieces = re.split(f"({re.escape(q)})", text, flags=re.IGNORECASE)
    out = []
    for i, piece in enumerate(pieces):
        # re.split with one capture group puts matches at odd indexes
        if i % 2:
            out.append(f'<span class="highlight">{html.escape(piece)}</span>')
        else:
            out.append(html.escape(piece))
    return "".join(out)
