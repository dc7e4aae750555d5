"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- IRP_GRAPH_DATA_DIR=/path/to/data
- IRP_SEARCH_CRUISE_SPEED_MPH=450
- IRP_QUERY_HOUR_BUDGET=1200
- IRP_QUERY_TARGETS='["Tahiti", "Bora Bora"]'
- IRP_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with IRP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="IRP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    islands_file: str = "islands.csv"
    routes_file: str = "routes.csv"

    @property
    def islands_path(self) -> Path:
        """Full path to islands CSV file."""
        return self.data_dir / self.islands_file

    @property
    def routes_path(self) -> Path:
        """Full path to routes CSV file."""
        return self.data_dir / self.routes_file


class SearchConfig(BaseSettings):
    """Search tuning.

    Environment variables prefixed with IRP_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="IRP_SEARCH_")

    cruise_speed_mph: int = Field(default=500, gt=0)
    distance_cache_size: Optional[int] = None


class QueryConfig(BaseSettings):
    """Queries run by the command-line pipeline.

    Environment variables prefixed with IRP_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="IRP_QUERY_")

    start: str = "Hawaii"
    targets: List[str] = Field(
        default_factory=lambda: [
            "Hawaii",
            "New Zealand",
            "Tahiti",
            "Samoa",
            "Fiji",
            "Guam",
            "Palau",
            "Bora Bora",
            "Solomon Islands",
        ]
    )
    hour_budget: int = Field(default=1000, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with IRP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="IRP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.cruise_speed_mph)
        print(config.graph.islands_path)

    Environment variables prefixed with IRP_.
    """

    model_config = SettingsConfigDict(env_prefix="IRP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
