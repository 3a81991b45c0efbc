"""Logging setup for the application entry points."""

import logging

from src.config.configuration import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(logging_config: LoggingConfig) -> None:
    """Configure root logging from the loaded LoggingConfig."""
    level = getattr(logging, logging_config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # boto3/botocore are very chatty at DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.WARNING))
