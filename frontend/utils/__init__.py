"""
Frontend helpers: API client, filtering, formatting and styles.
"""
