"""HTTP controllers."""

from src.api.controller.product_controller import (
    PRODUCT_ID_LENGTH,
    get_product_repository,
    router as product_router,
)

__all__ = ["PRODUCT_ID_LENGTH", "get_product_repository", "product_router"]
