"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden from the environment or a .env file
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://nestwell:nestwell@db:5432/nestwell"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgres:// or postgresql://; asyncpg needs the driver suffix."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    default_page_size: int = 50

    # Rewards
    memory_reward_coins: int = 10

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
