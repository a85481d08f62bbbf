"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (RACECARD_*) or .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RACECARD_",
        extra="ignore",
    )

    # Extraction
    debug: bool = False  # include raw startlist headers per race
    html_parser: str = "lxml"

    # Logging
    log_level: str = "INFO"

    # Export
    output_indent: int = 2


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Export for convenience
settings = get_settings()
