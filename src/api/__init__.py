"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.controller import product_router
from src.clients import CosmosDBClient, DocumentStoreInterface, S3StorageClient, StorageInterface
from src.config import get_config
from src.form.price import CURRENCY_SYMBOL
from src.services.product_submission_service import IMAGE_PREFIX, PRODUCTS_COLLECTION

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the cloud clients from configuration unless they were injected."""
    cosmos_client: Optional[CosmosDBClient] = None

    if app.state.storage is None or app.state.document_store is None:
        config = get_config()
        app.state.currency_symbol = config.product_form.currency_symbol
        app.state.image_prefix = config.object_storage.image_prefix
        app.state.products_collection = config.cosmosdb.products_container

        if app.state.storage is None:
            app.state.storage = S3StorageClient.from_config(config.object_storage)
        if app.state.document_store is None:
            cosmos_client = CosmosDBClient.from_config(config.cosmosdb)
            await cosmos_client.connect()
            app.state.document_store = cosmos_client

    try:
        yield
    finally:
        if cosmos_client is not None:
            await cosmos_client.close()
            logger.info("Cosmos DB connection closed")


def create_app(
    storage: Optional[StorageInterface] = None,
    document_store: Optional[DocumentStoreInterface] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Clients that are not passed in are created from configuration at startup.
    """
    app = FastAPI(
        title="Product Catalog Admin API",
        description="Add-product form backed by object storage and Cosmos DB",
        version="1.0.0",
        lifespan=_lifespan,
    )

    app.state.storage = storage
    app.state.document_store = document_store
    app.state.currency_symbol = CURRENCY_SYMBOL
    app.state.image_prefix = IMAGE_PREFIX
    app.state.products_collection = PRODUCTS_COLLECTION

    # CORS for the admin frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production: specify the admin origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
