"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- KIWI_GRAPH_EDGES='["AB5", "BC4"]'
- KIWI_GRAPH_EDGES_FILE=/path/to/edges.txt
- KIWI_API_PORT=8080
- KIWI_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .graph.edges import DEFAULT_EDGE_TOKENS


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with KIWI_GRAPH_. When ``edges_file``
    is set it takes precedence over ``edges``.
    """

    model_config = SettingsConfigDict(env_prefix="KIWI_GRAPH_")

    edges: List[str] = Field(default_factory=lambda: list(DEFAULT_EDGE_TOKENS))
    edges_file: Optional[Path] = None


class ApiConfig(BaseSettings):
    """HTTP API configuration.

    Environment variables prefixed with KIWI_API_.
    """

    model_config = SettingsConfigDict(env_prefix="KIWI_API_")

    title: str = "Kiwiland Railroad API"
    host: str = "127.0.0.1"
    port: int = 3000
    prefix: str = "/api"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with KIWI_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="KIWI_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edges)
        print(config.api.port)

    Environment variables prefixed with KIWI_.
    """

    model_config = SettingsConfigDict(env_prefix="KIWI_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
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
