"""Application configuration and settings."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Talent Flow services."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    database_url: str = "sqlite+aiosqlite:///./data/talent_flow.db"
    data_directory: Path = Path("data")

    analysis_max_text_length: int = 20_000
    default_salary_currency: str = "USD"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    settings = Settings()
    settings.data_directory.mkdir(parents=True, exist_ok=True)
    return settings


settings = get_settings()
