"""
API Router

Aggregates all endpoint routers.
"""

from fastapi import APIRouter

from product_api.api.endpoints import auth, products

router = APIRouter()

# Include authentication routes
router.include_router(auth.router)

# Include product routes
router.include_router(products.router)
