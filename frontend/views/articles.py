# views/articles.py

import streamlit as st

from config import API_URL
from utils.api import APIClient
from utils.filtering import (
    ARTICLE_SEARCH_FIELDS,
    ALL,
    CATEGORIES,
    Clear,
    FilterState,
    SetCategory,
    SetQuery,
    ToggleSubscription,
    filter_items,
    highlight,
    reduce,
)
from utils.formatters import format_byline, format_date, format_result_count

STATE_KEY = "article_filter"


def _state() -> FilterState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = FilterState()
    return st.session_state[STATE_KEY]


def _dispatch(action):
    st.session_state[STATE_KEY] = reduce(_state(), action)


# Widget event handlers

def _on_query_change():
    _dispatch(SetQuery(st.session_state["article_query"]))


def _on_category_change():
    _dispatch(SetCategory(st.session_state["article_category"]))


def _on_clear():
    _dispatch(Clear())
    st.session_state["article_query"] = ""
    st.session_state["article_category"] = ALL


def _render_card(article: dict, state: FilterState):
    with st.container(border=True):
        st.caption(article.get("tag", ""))
        st.markdown(f"### {highlight(article.get('title', ''), state.query)}", unsafe_allow_html=True)
        st.markdown(
            f"<div class='archive-meta'>{format_byline(article)} · {format_date(article.get('created_at'))}</div>",
            unsafe_allow_html=True,
        )
        st.markdown(highlight(article.get("excerpt", ""), state.query), unsafe_allow_html=True)

        item_id = article.get("id")
        if item_id:
            label = "Subscribed" if state.is_subscribed(item_id) else "Subscribe"
            st.button(
                label,
                key=f"subscribe_{item_id}",
                on_click=_dispatch,
                args=(ToggleSubscription(item_id),),
            )


def render():
    st.title("Articles")

    api = APIClient(API_URL)
    with st.spinner("Loading articles..."):
        result = api.list_articles()

    if result["status"] != 200:
        st.error(result.get("error", "Could not load articles."))
        return

    articles = result["data"] or []

    col_search, col_clear = st.columns([5, 1])
    with col_search:
        st.text_input("Search", key="article_query", on_change=_on_query_change,
                      placeholder="Title, excerpt or author")
    with col_clear:
        st.button("Clear", on_click=_on_clear)
    st.radio("Category", CATEGORIES, key="article_category", horizontal=True,
             on_change=_on_category_change)

    state = _state()
    shown = filter_items(state, articles, ARTICLE_SEARCH_FIELDS)
    st.caption(format_result_count(len(shown), len(articles)))

    if not shown:
        st.info("No results found.")
        return

    for article in shown:
        _render_card(article, state)
