"""Configuration module for the product catalog admin.

Loads settings from config.yaml for non-sensitive values and .env for credentials.
Fails fast with clear error messages if required configuration is missing.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

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

    with open(config_path, "r", encoding="utf-8") as f:
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
class ObjectStorageConfig:
    """S3-compatible object storage configuration."""
    access_key_id: str
    secret_access_key: str
    bucket_name: str
    region: str
    endpoint_url: Optional[str]
    image_prefix: str
    public_base_url: Optional[str]
    multipart_threshold_mb: int


@dataclass(frozen=True)
class CosmosDBConfig:
    """Azure Cosmos DB configuration for product records."""
    endpoint: str
    key: str
    database_name: str
    products_container: str
    partition_key_path: str


@dataclass(frozen=True)
class ProductFormConfig:
    """Add-product form settings."""
    currency_symbol: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    object_storage: ObjectStorageConfig
    cosmosdb: CosmosDBConfig
    product_form: ProductFormConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from config.yaml for non-sensitive settings and .env for credentials.
    Fails fast if required configuration is missing.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If required configuration is missing.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    # Build object storage config
    storage_section = yaml_config.get("object_storage", {})

    bucket_name = storage_section.get("bucket_name")
    if not bucket_name:
        raise ConfigurationError("object_storage.bucket_name must be set in config.yaml")

    object_storage_config = ObjectStorageConfig(
        access_key_id=_get_required_env("AWS_ACCESS_KEY_ID"),
        secret_access_key=_get_required_env("AWS_SECRET_ACCESS_KEY"),
        bucket_name=bucket_name,
        region=storage_section.get("region", "us-east-1"),
        endpoint_url=_get_optional_env("S3_ENDPOINT_URL", storage_section.get("endpoint_url")),
        image_prefix=storage_section.get("image_prefix", "productImages"),
        public_base_url=storage_section.get("public_base_url"),
        multipart_threshold_mb=int(storage_section.get("multipart_threshold_mb", 8)),
    )

    # Build Cosmos DB config
    cosmos_section = yaml_config.get("cosmosdb", {})

    cosmosdb_config = CosmosDBConfig(
        endpoint=_get_required_env("COSMOSDB_ENDPOINT"),
        key=_get_required_env("COSMOSDB_KEY"),
        database_name=cosmos_section.get("database_name", "catalog"),
        products_container=cosmos_section.get("products_container", "products"),
        partition_key_path=cosmos_section.get("partition_key_path", "/category"),
    )

    form_section = yaml_config.get("product_form", {})

    product_form_config = ProductFormConfig(
        currency_symbol=form_section.get("currency_symbol", "₱"),
    )

    logging_section = yaml_config.get("logging", {})

    logging_config = LoggingConfig(
        level=logging_section.get("level", "INFO"),
    )

    return AppConfig(
        object_storage=object_storage_config,
        cosmosdb=cosmosdb_config,
        product_form=product_form_config,
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
