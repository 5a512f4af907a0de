"""
Database module - MongoDB and Redis connections and collection definitions.
"""
from app.database.connections import (
    get_mongo_client,
    get_redis_client,
    get_archive_db,
    close_connections,
)
from app.database.databases import archive_db

__all__ = [
    "get_mongo_client",
    "get_redis_client",
    "get_archive_db",
    "close_connections",
    "archive_db",
]
