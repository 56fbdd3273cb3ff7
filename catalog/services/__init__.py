"""Service layer for the product catalog."""

from .product_store import ProductCatalog

__all__ = ["ProductCatalog"]
