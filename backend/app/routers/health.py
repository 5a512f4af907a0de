"""
Health check router for liveness and readiness probes.
"""
import logging

from fastapi import APIRouter, status

from app.database.connections import get_mongo_client, get_redis_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


async def _ping_mongodb() -> None:
    client = await get_mongo_client()
    await client.admin.command("ping")


async def _ping_redis() -> None:
    redis = await get_redis_client()
    await redis.ping()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """Returns 200 while the app is serving requests."""
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check that pings the document store and the session store.
    Always 200; `status` is "degraded" when either is unreachable.
    """
    checks = {"api": "healthy"}
    
    for name, ping in (("mongodb", _ping_mongodb), ("redis", _ping_redis)):
        try:
            await ping()
            checks[name] = "healthy"
        except Exception as e:
            logger.warning("Readiness check for %s failed: %s", name, e)
            checks[name] = "unhealthy"
    
    all_healthy = all(v == "healthy" for v in checks.values())
    
    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
