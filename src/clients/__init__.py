"""Client modules for external services."""

from src.clients.cosmosdb_client import CosmosDBClient
from src.clients.interfaces import (
    DocumentStoreError,
    DocumentStoreInterface,
    StorageException,
    StorageFile,
    StorageInterface,
    UploadProgress,
)
from src.clients.s3_storage_client import S3StorageClient

__all__ = [
    "CosmosDBClient",
    "DocumentStoreError",
    "DocumentStoreInterface",
    "S3StorageClient",
    "StorageException",
    "StorageFile",
    "StorageInterface",
    "UploadProgress",
]
