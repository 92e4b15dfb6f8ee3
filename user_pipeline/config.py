"""
Configuration settings for the user pipeline.

Uses Pydantic Settings to load environment variables for the record source,
the persistence destination, dispatch tuning and logging. The pipeline itself
never reads these implicitly; the CLI turns them into an explicit
``RunConfig`` value.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Source
    source_url: str = Field("https://jsonplaceholder.typicode.com/users", alias="SOURCE_URL")
    request_timeout_seconds: float = Field(30.0, alias="REQUEST_TIMEOUT_SECONDS")

    # Persistence
    output_path: str = Field("filtered_users.yaml", alias="OUTPUT_PATH")

    # Filtering and dispatch
    filter_term: str = Field("task-force", alias="FILTER_TERM")
    dispatch_strategy: str = Field("channel", alias="DISPATCH_STRATEGY")
    max_workers: int = Field(8, alias="MAX_WORKERS")
    handoff_buffer: int = Field(1, alias="HANDOFF_BUFFER")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
