"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from azure.cosmos.exceptions import CosmosHttpResponseError
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.controller import product_router
from src.clients import CosmosDBClient
from src.config import AppConfig, LoggingConfig, get_config
from src.repositories import CosmosProductRepository, ProductRepository
from src.services import seed_catalog

logger = logging.getLogger(__name__)


def configure_logging(logging_config: LoggingConfig) -> None:
    """Apply the configured level and format to the root logger."""
    logging.basicConfig(level=logging_config.level, format=logging_config.format)


def create_app(
    repository: Optional[ProductRepository] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Configuration is resolved here, before the app is built, unless a
    repository is injected without one (backend-free use keeps the defaults).

    Args:
        repository: Repository to serve instead of connecting to Cosmos DB.
        config: Configuration to use instead of the lazily loaded singleton.
    """
    app_config = config
    if app_config is None and repository is None:
        app_config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if repository is not None:
            app.state.product_repository = repository
            yield
            return

        configure_logging(app_config.logging)

        cosmos = app_config.cosmosdb
        async with CosmosDBClient(
            endpoint=cosmos.endpoint,
            key=cosmos.key,
            database_name=cosmos.database_name,
            container_name=cosmos.container_name,
        ) as cosmos_client:
            product_repository = CosmosProductRepository(cosmos_client.products)
            if app_config.catalog.seed_on_startup:
                await seed_catalog(product_repository)

            app.state.product_repository = product_repository
            yield

    app = FastAPI(
        title=app_config.api.title if app_config else "Catalog API",
        description="REST API for catalog products",
        version="1.0.0",
        lifespan=lifespan,
    )
    if repository is not None:
        app.state.product_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.cors_allow_origins if app_config else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(product_router)

    @app.exception_handler(CosmosHttpResponseError)
    async def storage_error_handler(request: Request, exc: CosmosHttpResponseError) -> JSONResponse:
        logger.exception(f"Storage backend error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Storage backend error"})

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
