"""
Product Routes

CRUD endpoints for products. Every route requires a valid bearer token.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.api.deps import get_current_claims
from product_api.api.responses import error_response
from product_api.core.config import Settings, get_settings
from product_api.core.database import get_db
from product_api.schemas.common import MessageResponse, ProblemDetails
from product_api.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from product_api.services import product_service


router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    dependencies=[Depends(get_current_claims)],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"description": "Missing or invalid bearer token"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ProblemDetails},
    },
)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List all products",
    responses={status.HTTP_204_NO_CONTENT: {"description": "No products stored"}},
)
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """
    Retrieve all products.

    Returns 204 with no body when the table is empty.
    """
    result = await product_service.list_products(db)
    if not result.ok:
        return error_response(result, "An error occurred while retrieving products.", settings)

    if not result.value:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return result.value


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get a product",
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
)
async def get_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Retrieve a product by its ID."""
    result = await product_service.get_product(db, product_id)
    if not result.ok:
        return error_response(result, "Error retrieving product.", settings)

    return result.value


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def create_product(
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    product: Annotated[Optional[ProductCreate], Body()] = None,
):
    """
    Create a new product.

    The response carries a ``Location`` header pointing at the new resource.
    A missing or ``null`` body yields 400.
    """
    result = await product_service.create_product(db, product)
    if not result.ok:
        return error_response(result, "Error creating product.", settings)

    response.headers["Location"] = f"/api/products/{result.value.id}"
    return result.value


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Update a product",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    },
)
async def update_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    product: Annotated[Optional[ProductUpdate], Body()] = None,
):
    """
    Overwrite name, description and price of an existing product.

    Returns 404 without touching the table when the product does not exist.
    """
    result = await product_service.update_product(db, product_id, product)
    if not result.ok:
        return error_response(result, "Error updating product.", settings)

    return MessageResponse(message="Product updated successfully.")


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete a product",
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
)
async def delete_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Delete a product by ID."""
    result = await product_service.delete_product(db, product_id)
    if not result.ok:
        return error_response(result, "Error deleting product.", settings)

    return MessageResponse(message="Product deleted successfully.")
