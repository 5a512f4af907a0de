"""
Unread Archive reader frontend (Streamlit).
"""
