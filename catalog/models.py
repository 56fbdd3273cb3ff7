"""Schemas for product payloads."""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

# Zero, negative and non-finite prices are rejected along with missing values.
Price = Union[PositiveInt, Annotated[float, Field(gt=0, allow_inf_nan=False)]]

FIELD_ORDER = ("id", "title", "description", "price", "thumbnail", "code", "stock")


class ProductModel(BaseModel):
    """Fields a caller supplies when creating a product."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: Price
    thumbnail: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    stock: PositiveInt

    def to_record(self, product_id: int) -> dict:
        data = self.model_dump()
        data["id"] = product_id
        return {key: data[key] for key in FIELD_ORDER}


class ProductUpdateModel(BaseModel):
    """Partial update; only the fields the caller sets are applied."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[Price] = None
    thumbnail: Optional[str] = Field(None, min_length=1)
    code: Optional[str] = Field(None, min_length=1)
    stock: Optional[PositiveInt] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field cannot be cleared")
        return value

    def overlay(self) -> dict:
        return self.model_dump(exclude_unset=True)
