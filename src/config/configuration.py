"""Configuration module for the Catalog API.

Loads settings from config.yaml for non-sensitive values and .env for secrets.
Fails fast with clear error messages if required configuration is missing.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from src/config/ up to project root
    return Path(__file__).parent.parent.parent


def _load_yaml_config() -> dict:
    """Load configuration from config.yaml."""
    config_path = _get_project_root() / "config.yaml"
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_required_env(key: str) -> str:
    """Get required environment variable or raise ConfigurationError."""
    value = os.environ.get(key)
    if not value:
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please add it to your .env file."
        )
    return value


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


@dataclass(frozen=True)
class CosmosDBConfig:
    """Cosmos DB connection configuration."""
    endpoint: str
    key: str
    database_name: str
    container_name: str


@dataclass(frozen=True)
class ApiConfig:
    """HTTP server configuration."""
    title: str
    host: str
    port: int
    cors_allow_origins: List[str]


@dataclass(frozen=True)
class CatalogConfig:
    """Catalog behaviour configuration."""
    seed_on_startup: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str
    format: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    cosmosdb: CosmosDBConfig
    api: ApiConfig
    catalog: CatalogConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from config.yaml for non-sensitive settings and .env for secrets.
    Fails fast if required configuration is missing.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If required configuration is missing.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    # Build Cosmos DB config; the endpoint may live in yaml or the environment
    cosmos_section = yaml_config.get("cosmosdb", {})
    endpoint = cosmos_section.get("endpoint") or _get_required_env("COSMOSDB_ENDPOINT")

    cosmosdb_config = CosmosDBConfig(
        endpoint=endpoint,
        key=_get_required_env("COSMOSDB_KEY"),
        database_name=cosmos_section.get("database_name", "CatalogDb"),
        container_name=cosmos_section.get("container_name", "Products"),
    )

    api_section = yaml_config.get("api", {})
    try:
        port = int(_get_optional_env("PORT") or api_section.get("port", 8000))
    except ValueError as e:
        raise ConfigurationError(f"Invalid port: {e}") from e

    api_config = ApiConfig(
        title=api_section.get("title", "Catalog API"),
        host=api_section.get("host", "0.0.0.0"),
        port=port,
        cors_allow_origins=list(api_section.get("cors_allow_origins", ["*"])),
    )

    catalog_section = yaml_config.get("catalog", {})

    catalog_config = CatalogConfig(
        seed_on_startup=bool(catalog_section.get("seed_on_startup", False)),
    )

    logging_section = yaml_config.get("logging", {})

    logging_config = LoggingConfig(
        level=logging_section.get("level", "INFO"),
        format=logging_section.get(
            "format", "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ),
    )

    return AppConfig(
        cosmosdb=cosmosdb_config,
        api=api_config,
        catalog=catalog_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If required configuration is missing.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config
