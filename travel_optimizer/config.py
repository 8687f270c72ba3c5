"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
input table locations, parsing leniency, search behaviour and logging.

Configuration can be overridden via environment variables:
- TRAVEL_SCHEDULE_DATA_DIR=/path/to/data
- TRAVEL_SCHEDULE_SKIP_INVALID_ROWS=true
- TRAVEL_SEARCH_PRUNING=location
- TRAVEL_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import PruningPolicy


class ScheduleConfig(BaseSettings):
    """Input table configuration.

    Environment variables prefixed with TRAVEL_SCHEDULE_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_SCHEDULE_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    schedules_file: str = "schedules.csv"
    requests_file: str = "requests.csv"
    delimiter: str = ","
    encoding: str = "utf-8"
    skip_invalid_rows: bool = False

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value

    @property
    def schedules_path(self) -> Path:
        """Full path to the schedule CSV file."""
        return self.data_dir / self.schedules_file

    @property
    def requests_path(self) -> Path:
        """Full path to the customer request CSV file."""
        return self.data_dir / self.requests_file


class SearchConfig(BaseSettings):
    """Route search configuration.

    Environment variables prefixed with TRAVEL_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_SEARCH_")

    pruning: PruningPolicy = PruningPolicy.LOCATION_TIME
    fail_fast: bool = False  # Abort the whole batch on the first bad request
    cache_results: bool = True
    cache_max_size: int = 10_000


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRAVEL_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.schedule.schedules_path)
        print(config.search.pruning)

    Environment variables prefixed with TRAVEL_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_")

    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
