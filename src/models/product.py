"""Product model shared by the repository layer and the HTTP API."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from typing_extensions import Annotated

# Exact Decimal in Python, plain JSON number on the wire
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Product(BaseModel):
    """A catalog product.

    ``id`` stays ``None`` until the storage layer assigns one on create.
    Backend system fields (``_rid``, ``_etag``, ``_ts``...) are dropped on load.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str
    price: Price
    category: str
    description: str
