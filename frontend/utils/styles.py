"""
CSS for the reader views.
"""

COLORS = {
    "text_secondary": "#8b949e",
    "highlight_bg": "#ffda79",
    "highlight_text": "#111111",
}


def get_global_css() -> str:
    """Return CSS for cards and search highlights."""
    return f"""
    <style>
        .highlight {{
            background: {COLORS['highlight_bg']};
            color: {COLORS['highlight_text']};
            border-radius: 3px;
            padding: 0 2px;
        }}
        .archive-meta {{
            color: {COLORS['text_secondary']};
            font-size: 0.9rem;
        }}
    </style>
    """


def inject_styles():
    """Inject global CSS into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
