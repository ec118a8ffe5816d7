"""Data access contract for products.

Callers (the HTTP controller, the catalog seeder) only talk to this interface,
so the storage backend can be swapped for another adapter or a test double.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.models import Product, WriteResult


class ProductRepository(ABC):
    """Abstract repository for persisted products."""

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """Return every stored product.

        No pagination, filtering or ordering guarantee. An empty store yields
        an empty list.
        """

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product with the given id, or None if there is none."""

    @abstractmethod
    async def create(self, product: Product) -> str:
        """Persist a new product and return the id assigned to it.

        Any id already set on ``product`` is ignored and the object itself is
        left untouched.
        """

    @abstractmethod
    async def update(self, product: Product) -> WriteResult:
        """Replace the stored product whose id equals ``product.id``.

        The whole record is replaced; there is no partial patch. A missing
        record is reported as ``WriteResult.NOT_FOUND`` and is never created.
        """

    @abstractmethod
    async def delete_by_id(self, product_id: str) -> WriteResult:
        """Remove the product with the given id.

        Deleting an id that is already gone returns ``WriteResult.NOT_FOUND``.
        """
