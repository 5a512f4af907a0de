# views/books.py

import streamlit as st

from config import API_URL
from utils.api import APIClient
from utils.filtering import BOOK_SEARCH_FIELDS, FilterState, SetQuery, filter_items, highlight, reduce
from utils.formatters import format_date, format_result_count

STATE_KEY = "book_filter"


def _on_query_change():
    state = st.session_state.get(STATE_KEY, FilterState())
    st.session_state[STATE_KEY] = reduce(state, SetQuery(st.session_state["book_query"]))


def _render_feedback(entries: list, empty_text: str):
    if not entries:
        st.caption(empty_text)
        return
    for entry in entries:
        st.markdown(f"**{entry.get('text', '')}**")
        st.caption(f"{entry.get('author', '')} · {format_date(entry.get('created_at'))}")


def _render_reviews(api: APIClient, book_id: str):
    result = api.list_reviews(book_id)
    if result["status"] != 200:
        st.caption("Reviews unavailable.")
        return
    _render_feedback(result["data"] or [], "No reviews yet.")


def _render_suggestions(api: APIClient):
    st.subheader("User Suggestions")
    st.caption(f"Sign in on the site ({API_URL}/books) to review or suggest a book.")
    result = api.list_suggestions()
    if result["status"] != 200:
        st.caption("Suggestions unavailable.")
        return
    _render_feedback(result["data"] or [], "No suggestions yet. Be the first!")


def render():
    st.title("Books")

    api = APIClient(API_URL)
    with st.spinner("Loading books..."):
        result = api.list_books()

    if result["status"] != 200:
        st.error(result.get("error", "Could not load books."))
        return

    books = result["data"] or []
    st.text_input("Search", key="book_query", on_change=_on_query_change,
                  placeholder="Title or description")

    state = st.session_state.get(STATE_KEY, FilterState())
    shown = filter_items(state, books, BOOK_SEARCH_FIELDS)
    st.caption(format_result_count(len(shown), len(books)))

    for book in shown:
        with st.container(border=True):
            col_img, col_text = st.columns([1, 4])
            with col_img:
                if book.get("image"):
                    st.image(book["image"])
            with col_text:
                st.markdown(f"### {highlight(book.get('title', ''), state.query)}", unsafe_allow_html=True)
                st.markdown(highlight(book.get("description", ""), state.query), unsafe_allow_html=True)
                if book.get("id"):
                    with st.expander("Reviews"):
                        _render_reviews(api, book["id"])

    _render_suggestions(api)
