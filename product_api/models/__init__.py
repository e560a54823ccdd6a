"""
Product API - Models Module

This module exports all SQLAlchemy models for the application.
Import Base for Alembic migrations.
"""

from product_api.core.database import Base

from product_api.models.product import Product

__all__ = [
    "Base",
    "Product",
]
