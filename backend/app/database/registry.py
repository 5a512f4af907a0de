"""
Index management for the archive database.
Ensures all collections are indexed on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.connections import get_archive_db
from app.database.databases import archive_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for all archive collections."""
    for collection, keys, options in archive_db.INDEXES:
        name = await db[collection].create_index(keys, **options)
        logger.debug("Index %s ensured on %s", name, collection)


async def init_database() -> None:
    """Connect to the archive database and ensure its indexes."""
    db = await get_archive_db()
    await create_indexes(db)
