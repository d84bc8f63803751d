"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parser settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NOTECONTENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Frontmatter keys checked for the title, in priority order
    title_keys: list[str] = ["title", "Title"]

    # markdown-it preset used to build the document parser
    markdown_preset: str = "commonmark"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
