"""
Product Schemas

Pydantic models for product request/response validation.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer


# Prices travel as JSON numbers, not strings
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductBase(BaseModel):
    """Fields a client may write."""

    name: str = Field(..., max_length=200, description="Product name")
    description: str = Field(default="", description="Product description")
    price: Price = Field(..., max_digits=18, decimal_places=2, description="Unit price")


class ProductCreate(ProductBase):
    """Schema for creating a product."""


class ProductUpdate(ProductBase):
    """Schema for a full overwrite of name, description and price."""


class ProductResponse(ProductBase):
    """Schema for product response."""

    id: int

    model_config = {"from_attributes": True}
