"""Application services."""

from src.services.catalog_seed_service import SAMPLE_PRODUCTS, seed_catalog

__all__ = ["SAMPLE_PRODUCTS", "seed_catalog"]
