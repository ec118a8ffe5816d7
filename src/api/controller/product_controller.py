"""REST controller for catalog products."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from starlette.convertors import Convertor, register_url_convertor

from src.models import Product
from src.repositories import ProductRepository

logger = logging.getLogger(__name__)

# Length of the ids assigned on create (uuid4 hex)
PRODUCT_ID_LENGTH = 32


class ProductIdConvertor(Convertor):
    """Path convertor accepting only ids of the generated length.

    Any other segment length makes the route not match at all.
    """

    regex = f"[^/]{{{PRODUCT_ID_LENGTH}}}"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("product_id", ProductIdConvertor())

router = APIRouter(prefix="/products", tags=["products"])


def get_product_repository(request: Request) -> ProductRepository:
    """Resolve the repository attached to the application."""
    return request.app.state.product_repository


@router.get("", response_model=List[Product])
async def get_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> List[Product]:
    """List every product."""
    return await repository.list_all()


@router.get("/{id:product_id}", response_model=Product, name="get_product_by_id")
async def get_product_by_id(
    id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Fetch one product or answer 404."""
    product = await repository.get_by_id(id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: Product,
    request: Request,
    response: Response,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Create a product and point the Location header at it."""
    product_id = await repository.create(product)
    created = product.model_copy(update={"id": product_id})

    response.headers["Location"] = str(request.url_for("get_product_by_id", id=product_id))
    return created


@router.put("/{id:product_id}", response_model=bool)
async def update_product(
    id: str,
    product: Product,
    repository: ProductRepository = Depends(get_product_repository),
) -> bool:
    """Replace a product; the body is the write acknowledgment."""
    result = await repository.update(product.model_copy(update={"id": id}))
    logger.info(f"Update of product {id}: {result.value}")
    return result.acknowledged


@router.delete("/{id:product_id}", response_model=bool)
async def delete_product(
    id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> bool:
    """Delete a product; the body is the write acknowledgment."""
    result = await repository.delete_by_id(id)
    logger.info(f"Delete of product {id}: {result.value}")
    return result.acknowledged
