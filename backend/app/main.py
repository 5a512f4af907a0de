"""
Unread Archive - FastAPI Application

A small content site: a book catalog with an admin CRUD surface,
community-written articles and session-based sign in.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from app.config import get_settings
from app.core.exceptions import PersistenceError
from app.database.connections import close_connections
from app.database.registry import init_database
from app.routers import articles, auth, books, health, pages

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("unread_archive")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    
    Startup:
    - Connect to MongoDB and create indexes
    
    Shutdown:
    - Close MongoDB and Redis connections
    """
    logger.info("Starting up Unread Archive...")
    
    try:
        await init_database()
        logger.info("MongoDB connected, indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)
    
    yield
    
    logger.info("Shutting down Unread Archive...")
    await close_connections()


app = FastAPI(
    title="Unread Archive",
    description="""
## Unread Archive

Books worth finishing and essays from the community.

### Features
- **Books**: public catalog plus an admin create/edit/delete surface
- **Articles**: community submissions, rendered and served as JSON
- **Accounts**: sign up / sign in with bcrypt-hashed passwords and a
  server-side session referenced by a signed cookie
    """,
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    """Storage failures answer a generic 500; details stay in the log."""
    logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(
        "Something went wrong. Please try again later.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Include routers
app.include_router(health.router)
app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(articles.router)
app.include_router(books.router)
