from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import REPORT_PAGE_SIZE, TOP_ENTRIES
from .types import DataRepr, SortBy, SortType


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_prefix="TRAFFIC_STATS_", env_file=".env")

    # Report settings
    report_page_size: int = Field(REPORT_PAGE_SIZE, gt=0, description="Connections per report page")
    top_entries: int = Field(TOP_ENTRIES, gt=0, description="Rows kept in host/service summaries")

    # Default view
    default_sort_type: SortType = Field(SortType.NEUTRAL, description="Initial report ordering")
    default_sort_by: SortBy = Field(SortBy.PACKETS, description="Initial report sort key")
    default_data_repr: DataRepr = Field(DataRepr.BYTES, description="Initial volume unit")

    # Logging settings
    log_level: str = Field("INFO", description="Level used by get_logger")


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


settings = get_settings()
