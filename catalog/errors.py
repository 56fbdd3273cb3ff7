"""Errors reported by the product catalog."""

from __future__ import annotations

from typing import Any, Dict, List

from commonlib.storage import DeserializationError, StoreError

__all__ = [
    "CatalogError",
    "DeserializationError",
    "DuplicateCodeError",
    "ImmutableFieldError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]


class CatalogError(StoreError):
    """Base class for rule violations detected by the catalog."""


class ValidationError(CatalogError):
    message = "All fields are required"

    def __init__(self, message: str | None = None, details: List[Dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.details = list(details or [])

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        if self.details:
            payload["details"] = self.details
        return payload


class DuplicateCodeError(CatalogError):
    message = "Product code already exists"

    def __init__(self, code: str) -> None:
        super().__init__(f"{self.message}: {code}")
        self.code = code


class NotFoundError(CatalogError):
    message = "Product Not Found"

    def __init__(self, product_id: Any) -> None:
        super().__init__()
        self.product_id = product_id

    def to_dict(self) -> Dict[str, Any]:
        return {"error": str(self), "id": self.product_id}


class ImmutableFieldError(CatalogError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Updating the product {field} is not allowed")
        self.field = field
