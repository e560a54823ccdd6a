"""
Product API - Schemas Module

Pydantic models for request/response validation.
"""

from product_api.schemas.auth import LoginRequest, LoginResponse, TokenClaims
from product_api.schemas.common import MessageResponse, ProblemDetails
from product_api.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "TokenClaims",
    # Common
    "MessageResponse",
    "ProblemDetails",
    # Product
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
