"""
Product API - Services Module

Business logic layer.
"""

from product_api.services import auth_service
from product_api.services import product_service
from product_api.services.results import ErrorKind, ServiceResult

__all__ = [
    "auth_service",
    "product_service",
    "ErrorKind",
    "ServiceResult",
]
