"""File-backed product catalog with CRUD operations."""

from .errors import (
    CatalogError,
    DeserializationError,
    DuplicateCodeError,
    ImmutableFieldError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .services.product_store import ProductCatalog

__all__ = [
    "CatalogError",
    "DeserializationError",
    "DuplicateCodeError",
    "ImmutableFieldError",
    "NotFoundError",
    "ProductCatalog",
    "StoreError",
    "ValidationError",
]
