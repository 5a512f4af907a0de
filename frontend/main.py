import streamlit as st
from streamlit_option_menu import option_menu

from views import articles, books
from utils.styles import inject_styles
from config import API_URL, APP_NAME
from utils.api import APIClient

PAGES = {
    "Articles": articles.render,
    "Books": books.render,
}


def init_session():
    defaults = {
        "nav_page": "Articles",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def main():
    st.set_page_config(page_title=APP_NAME, layout="wide")
    inject_styles()
    init_session()

    with st.sidebar:
        nav_options = list(PAGES)
        current_page = st.session_state.get("nav_page", nav_options[0])
        page_selected = option_menu(
            menu_title=APP_NAME,
            options=nav_options,
            icons=["journal-text", "book"],
            default_index=nav_options.index(current_page),
            key="main_nav",
        )
        st.session_state["nav_page"] = page_selected

        if APIClient(API_URL).health()["status"] != 200:
            st.warning("Backend unavailable, feeds may not load.")

    PAGES[page_selected]()


if __name__ == "__main__":
    main()
