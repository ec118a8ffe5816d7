"""Configuration module."""

from src.config.configuration import (
    ApiConfig,
    AppConfig,
    CatalogConfig,
    ConfigurationError,
    CosmosDBConfig,
    LoggingConfig,
    get_config,
    load_config,
)

__all__ = [
    "ApiConfig",
    "AppConfig",
    "CatalogConfig",
    "ConfigurationError",
    "CosmosDBConfig",
    "LoggingConfig",
    "get_config",
    "load_config",
]
