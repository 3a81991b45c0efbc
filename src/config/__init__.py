"""Configuration module."""

from src.config.configuration import (
    AppConfig,
    ConfigurationError,
    CosmosDBConfig,
    LoggingConfig,
    ObjectStorageConfig,
    ProductFormConfig,
    get_config,
    load_config,
)
from src.config.logging_config import configure_logging

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "CosmosDBConfig",
    "LoggingConfig",
    "ObjectStorageConfig",
    "ProductFormConfig",
    "configure_logging",
    "get_config",
    "load_config",
]
