"""Shared test doubles for the product repository and its Cosmos DB container."""

import re
import uuid
from decimal import Decimal
from typing import Any, Dict, List, Optional

import pytest
from azure.cosmos.exceptions import (
    CosmosAccessConditionFailedError,
    CosmosResourceExistsError,
    CosmosResourceNotFoundError,
)

from src.models import Product, WriteResult
from src.repositories import ProductRepository

_FILTER = re.compile(r"WHERE c\.(\w+) = (@\w+)")


class FakeContainer:
    """In-memory stand-in for an ``azure.cosmos.aio`` ContainerProxy.

    Only the calls the repository makes are implemented. Ids listed in
    ``declined_ids`` fail writes with a precondition error; setting
    ``failure`` makes every call raise it.
    """

    def __init__(self):
        self.items: Dict[str, Dict[str, Any]] = {}
        self.declined_ids: set = set()
        self.failure: Optional[Exception] = None
        self.queries: List[str] = []

    def _check_failure(self) -> None:
        if self.failure is not None:
            raise self.failure

    def query_items(self, query: str, parameters=None, **kwargs):
        self._check_failure()
        self.queries.append(query)
        match = _FILTER.search(query)
        values = {p["name"]: p["value"] for p in parameters or []}

        async def results():
            for item in list(self.items.values()):
                if match is None or item.get(match.group(1)) == values[match.group(2)]:
                    yield {**item, "_rid": "rid==", "_etag": '"0000"', "_ts": 1700000000}

        return results()

    async def create_item(self, body: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        self._check_failure()
        if body["id"] in self.items:
            raise CosmosResourceExistsError(status_code=409, message="Entity already exists")
        self.items[body["id"]] = dict(body)
        return {**body, "_ts": 1700000000}

    async def replace_item(self, item: str, body: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        self._check_failure()
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Entity not found")
        if item in self.declined_ids:
            raise CosmosAccessConditionFailedError(status_code=412, message="Precondition failed")
        self.items[item] = dict(body)
        return dict(body)

    async def delete_item(self, item: str, partition_key: str, **kwargs) -> None:
        self._check_failure()
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Entity not found")
        if item in self.declined_ids:
            raise CosmosAccessConditionFailedError(status_code=412, message="Precondition failed")
        del self.items[item]


class InMemoryProductRepository(ProductRepository):
    """Dictionary-backed repository used in place of the Cosmos DB adapter."""

    def __init__(self):
        self.products: Dict[str, Product] = {}
        self.declined_ids: set = set()

    async def list_all(self) -> List[Product]:
        return list(self.products.values())

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    async def create(self, product: Product) -> str:
        product_id = uuid.uuid4().hex
        self.products[product_id] = product.model_copy(update={"id": product_id})
        return product_id

    async def update(self, product: Product) -> WriteResult:
        if product.id not in self.products:
            return WriteResult.NOT_FOUND
        if product.id in self.declined_ids:
            return WriteResult.DECLINED
        self.products[product.id] = product
        return WriteResult.APPLIED

    async def delete_by_id(self, product_id: str) -> WriteResult:
        if product_id not in self.products:
            return WriteResult.NOT_FOUND
        if product_id in self.declined_ids:
            return WriteResult.DECLINED
        del self.products[product_id]
        return WriteResult.APPLIED


@pytest.fixture
def fake_container():
    return FakeContainer()


@pytest.fixture
def pen():
    return Product(
        name="Pen",
        price=Decimal("1.50"),
        category="Office",
        description="Blue ink",
    )


@pytest.fixture
def memory_repository():
    return InMemoryProductRepository()
