"""
Connection management for MongoDB (documents) and Redis (sessions).
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from redis.asyncio import Redis

from app.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instances
_mongo_client: Optional[AsyncIOMotorClient] = None
_redis_client: Optional[Redis] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


async def get_redis_client() -> Redis:
    """Get or create Redis client."""
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        _redis_client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            decode_responses=True,
        )
    return _redis_client


async def get_archive_db() -> AsyncIOMotorDatabase:
    """Get the archive database named in settings."""
    client = await get_mongo_client()
    return client[get_settings().mongo_db_name]


async def close_connections():
    """Close all database connections."""
    global _mongo_client, _redis_client
    
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        logger.info("MongoDB client closed")
    
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
        logger.info("Redis client closed")
