"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # MongoDB
    mongo_uri: str = "mongodb://127.0.0.1:27017"
    mongo_db_name: str = "unreadArchive"
    
    # Redis (session store)
    redis_host: str = "redis"
    redis_port: int = 6379
    
    # Session cookie
    session_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    session_algorithm: str = "HS256"
    session_cookie_name: str = "unread_session"
    session_ttl_seconds: int = 60 * 60 * 24
    
    # Passwords
    bcrypt_rounds: int = 10
    
    # Articles
    excerpt_length: int = 120
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
