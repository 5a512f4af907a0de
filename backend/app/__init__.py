"""
Unread Archive backend - books, community articles and session auth on FastAPI.
"""
