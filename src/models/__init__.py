"""Data models module."""

from src.models.product import Product
from src.models.write_result import WriteResult

__all__ = ["Product", "WriteResult"]
