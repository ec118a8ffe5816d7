"""Parameterized Cosmos DB queries over the product container."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from src.models import Product

_ALIAS = "c"

# Fields stored as plain strings, so a bound value compares as stored
FILTERABLE_FIELDS = frozenset({"id", "name", "category", "description"})


@dataclass(frozen=True)
class ProductQuery:
    """SQL text plus its bound parameters, ready for ``container.query_items``."""

    text: str
    parameters: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def all(cls) -> "ProductQuery":
        """Unfiltered query returning every product document."""
        return cls(text=f"SELECT * FROM {_ALIAS}")

    @classmethod
    def where_equals(cls, field_name: str, value: Any) -> "ProductQuery":
        """Equality filter on one product field.

        The value is always bound as a query parameter, never inlined.

        Raises:
            ValueError: If ``field_name`` is not a filterable Product field.
        """
        if field_name not in Product.model_fields:
            raise ValueError(f"Unknown product field: {field_name}")
        if field_name not in FILTERABLE_FIELDS:
            raise ValueError(f"Product field not filterable: {field_name}")

        param = f"@{field_name}"
        return cls(
            text=f"SELECT * FROM {_ALIAS} WHERE {_ALIAS}.{field_name} = {param}",
            parameters=[{"name": param, "value": value}],
        )
