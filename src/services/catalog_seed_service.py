"""Populates an empty catalog with sample products."""

import logging
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from src.models import Product
from src.repositories import ProductRepository

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: Tuple[Product, ...] = (
    Product(
        name="IPhone X",
        price=Decimal("950.00"),
        category="Smart Phone",
        description="Apple smartphone with an edge-to-edge OLED display.",
    ),
    Product(
        name="Samsung 10",
        price=Decimal("840.00"),
        category="Smart Phone",
        description="Samsung flagship with a curved AMOLED screen.",
    ),
    Product(
        name="Huawei Plus",
        price=Decimal("650.00"),
        category="White Appliances",
        description="Mid-range phone with a large battery.",
    ),
    Product(
        name="Xiaomi Mi 9",
        price=Decimal("470.00"),
        category="White Appliances",
        description="Budget flagship with a triple camera.",
    ),
    Product(
        name="HTC U11+ Plus",
        price=Decimal("380.00"),
        category="Smart Phone",
        description="Squeezable frame and a liquid surface finish.",
    ),
    Product(
        name="LG G7 ThinQ",
        price=Decimal("240.00"),
        category="Home Kitchen",
        description="Phone with a Boombox speaker and AI camera.",
    ),
)


async def seed_catalog(
    repository: ProductRepository,
    products: Optional[Sequence[Product]] = None,
) -> int:
    """Create sample products if the catalog is empty.

    The emptiness check and the creates are not atomic. Workers starting at
    the same time against an empty catalog can each seed it, so enable
    ``catalog.seed_on_startup`` for a single worker only.

    Args:
        repository: Repository to seed.
        products: Products to create; defaults to ``SAMPLE_PRODUCTS``.

    Returns:
        Number of products created; 0 when the catalog already had data.
    """
    existing = await repository.list_all()
    if existing:
        logger.debug(f"Catalog already holds {len(existing)} products, skipping seed")
        return 0

    if products is None:
        products = SAMPLE_PRODUCTS

    for product in products:
        await repository.create(product)

    logger.info(f"Seeded catalog with {len(products)} products")
    return len(products)
