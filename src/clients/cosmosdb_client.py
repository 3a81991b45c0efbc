"""Azure Cosmos DB client for product record storage."""

import logging
import uuid
from typing import Any, Optional

from azure.core.exceptions import AzureError
from azure.cosmos.aio import CosmosClient
from azure.cosmos.aio._container import ContainerProxy
from azure.cosmos.aio._database import DatabaseProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from src.clients.interfaces import DocumentStoreError, DocumentStoreInterface
from src.config.configuration import CosmosDBConfig

logger = logging.getLogger(__name__)


class CosmosDBClient(DocumentStoreInterface):
    """Async Cosmos DB client with connection management.

    Uses the NoSQL API. Each collection maps to a container, created on
    first use. Supports async context manager pattern for proper resource
    cleanup.
    """

    def __init__(
        self,
        endpoint: str,
        key: str,
        database_name: str,
        partition_key_path: str = "/category",
    ):
        """Initialize the Cosmos DB client.

        Args:
            endpoint: Cosmos DB account endpoint URL
            key: Cosmos DB account key
            database_name: Name of the database to use
            partition_key_path: Partition key path for containers created by this client
        """
        self._endpoint = endpoint
        self._key = key
        self._database_name = database_name
        self._partition_key_path = partition_key_path

        self._client: Optional[CosmosClient] = None
        self._database: Optional[DatabaseProxy] = None
        self._containers: dict[str, ContainerProxy] = {}

    @classmethod
    def from_config(cls, config: CosmosDBConfig) -> "CosmosDBClient":
        return cls(
            endpoint=config.endpoint,
            key=config.key,
            database_name=config.database_name,
            partition_key_path=config.partition_key_path,
        )

    async def connect(self) -> None:
        """Establish connection and ensure the database exists."""
        self._client = CosmosClient(url=self._endpoint, credential=self._key)
        await self._client.__aenter__()

        # Get or create database
        try:
            self._database = self._client.get_database_client(self._database_name)
            # Verify database exists by reading it
            await self._database.read()
        except CosmosResourceNotFoundError:
            self._database = await self._client.create_database(self._database_name)

        logger.info(f"Connected to Cosmos DB database '{self._database_name}'")

    async def close(self) -> None:
        """Close the Cosmos DB connection."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None
            self._containers = {}

    async def __aenter__(self) -> "CosmosDBClient":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Async context manager exit with cleanup."""
        await self.close()
        return False

    async def _get_container(self, collection: str) -> ContainerProxy:
        """Return the container for a collection, creating it if missing."""
        if self._database is None:
            raise RuntimeError("CosmosDB client not connected. Call connect() first.")

        container = self._containers.get(collection)
        if container is not None:
            return container

        try:
            container = self._database.get_container_client(collection)
            # Verify container exists by reading it
            await container.read()
        except CosmosResourceNotFoundError:
            logger.info(f"Creating Cosmos DB container '{collection}'")
            container = await self._database.create_container(
                id=collection,
                partition_key={"paths": [self._partition_key_path], "kind": "Hash"},
            )

        self._containers[collection] = container
        return container

    async def create_item(self, collection: str, item: dict[str, Any]) -> dict[str, Any]:
        """Insert a new item into a collection.

        Args:
            collection: Container name
            item: Dictionary containing the item data. An 'id' is generated
                  when missing. Must include the partition key field.

        Returns:
            The created item with any system-generated fields.

        Raises:
            RuntimeError: If client is not connected.
            DocumentStoreError: If Cosmos DB rejects the write or cannot be reached.
        """
        # Ensure item has an id
        if "id" not in item:
            item["id"] = str(uuid.uuid4())

        try:
            container = await self._get_container(collection)
            result = await container.create_item(body=item)
        except AzureError as e:
            # CosmosHttpResponseError and transport errors share this base
            logger.error(f"Failed to create item in '{collection}': {e.message}")
            raise DocumentStoreError(e.message or str(e)) from e

        logger.info(f"Created item {item['id']} in '{collection}'")
        return dict(result)
