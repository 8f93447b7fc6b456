"""
Configuration management for the Shoe Store backend
"""

import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./shoestore.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SHOESTORE_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_database_url() -> str:
    """Get database URL, checking the environment first so tests can redirect it."""
    return os.getenv("SHOESTORE_DATABASE_URL") or settings.database_url


def to_async_url(database_url: str) -> str:
    """Translate a sync database URL into its async driver equivalent."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url
