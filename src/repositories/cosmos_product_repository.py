"""Cosmos DB implementation of the product repository."""

import logging
import uuid
from typing import Any, Dict, List, Optional

from azure.cosmos.aio._container import ContainerProxy
from azure.cosmos.exceptions import (
    CosmosAccessConditionFailedError,
    CosmosResourceNotFoundError,
)

from src.models import Product, WriteResult
from src.repositories.product_repository import ProductRepository
from src.repositories.queries import ProductQuery

logger = logging.getLogger(__name__)


def _to_document(product: Product, product_id: str) -> Dict[str, Any]:
    """Serialize a product for storage; price is kept as an exact decimal string."""
    document = product.model_dump(exclude={"id"})
    document["price"] = str(product.price)
    document["id"] = product_id
    return document


class CosmosProductRepository(ProductRepository):
    """Product repository backed by a single Cosmos DB container.

    The container must be partitioned on ``/id`` so every point operation can
    use the product id as its partition key.

    Writes carry no etag or match condition, so Cosmos DB does not answer
    them with 412 and ``WriteResult.DECLINED`` is not produced here.
    A 412 is still mapped to ``DECLINED`` should a precondition be added.
    """

    def __init__(self, container: Optional[ContainerProxy]):
        """Initialize the repository.

        Args:
            container: Connected container holding product documents.

        Raises:
            ValueError: If no container is supplied.
        """
        if container is None:
            raise ValueError("container must not be None")
        self._container = container

    async def _query(self, query: ProductQuery) -> List[Product]:
        products = []
        async for item in self._container.query_items(
            query=query.text,
            parameters=query.parameters or None,
        ):
            products.append(Product.model_validate(dict(item)))
        return products

    async def list_all(self) -> List[Product]:
        products = await self._query(ProductQuery.all())
        logger.debug(f"Listed {len(products)} products")
        return products

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        matches = await self._query(ProductQuery.where_equals("id", product_id))
        if not matches:
            logger.debug(f"Product not found: {product_id}")
            return None
        return matches[0]

    async def create(self, product: Product) -> str:
        document = _to_document(product, uuid.uuid4().hex)
        created = await self._container.create_item(body=document)

        logger.info(f"Created product {created['id']} ({product.name})")
        return created["id"]

    async def update(self, product: Product) -> WriteResult:
        if not product.id:
            return WriteResult.NOT_FOUND

        try:
            await self._container.replace_item(
                item=product.id,
                body=_to_document(product, product.id),
            )
        except CosmosResourceNotFoundError:
            logger.info(f"Update skipped, product not found: {product.id}")
            return WriteResult.NOT_FOUND
        except CosmosAccessConditionFailedError:
            logger.warning(f"Update declined by backend for product {product.id}")
            return WriteResult.DECLINED

        logger.info(f"Updated product {product.id}")
        return WriteResult.APPLIED

    async def delete_by_id(self, product_id: str) -> WriteResult:
        try:
            await self._container.delete_item(item=product_id, partition_key=product_id)
        except CosmosResourceNotFoundError:
            logger.info(f"Delete skipped, product not found: {product_id}")
            return WriteResult.NOT_FOUND
        except CosmosAccessConditionFailedError:
            logger.warning(f"Delete declined by backend for product {product_id}")
            return WriteResult.DECLINED

        logger.info(f"Deleted product {product_id}")
        return WriteResult.APPLIED
