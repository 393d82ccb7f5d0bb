"""Application configuration from environment."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Questkeeper"
    debug: bool = False
    log_level: str = "INFO"

    # Database (async driver; alembic converts to a sync one)
    database_url: str = "sqlite+aiosqlite:///./questkeeper.db"

    # JWT bearer tokens
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    # bcrypt cost; tests lower this
    bcrypt_rounds: int = 12

    cors_origins: list[str] = ["*"]

    # Insert the built-in chapters/items/enemies when the stories table is empty
    seed_content: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()

