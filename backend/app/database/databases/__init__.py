"""
Database definitions and collection constants.
"""
from app.database.databases import archive_db

__all__ = ["archive_db"]
