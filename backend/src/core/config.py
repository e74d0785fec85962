"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SQLITE_PATH = "./data/personal_dash.db"

# Upper bound for any single database statement
STATEMENT_TIMEOUT_SECONDS = 8.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    sqlite_path: str = DEFAULT_SQLITE_PATH

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    log_level: str = "INFO"

    @field_validator("sqlite_path", mode="before")
    @classmethod
    def default_blank_sqlite_path(cls, v: str | None) -> str:
        """Strip whitespace; blank values fall back to the default path."""
        if v is None:
            return DEFAULT_SQLITE_PATH
        stripped = str(v).strip()
        return stripped or DEFAULT_SQLITE_PATH

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the async SQLite driver."""
        return f"sqlite+aiosqlite:///{self.sqlite_path}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
