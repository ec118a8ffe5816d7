"""Product data access: contract, Cosmos DB adapter and query builder."""

from src.repositories.cosmos_product_repository import CosmosProductRepository
from src.repositories.product_repository import ProductRepository
from src.repositories.queries import ProductQuery

__all__ = ["CosmosProductRepository", "ProductRepository", "ProductQuery"]
