"""
Product Service

Data access for the products table. Every operation returns a
``ServiceResult``; persistence errors are caught here and reported as
``ErrorKind.INTERNAL`` with the underlying exception message.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.models.product import Product
from product_api.schemas.product import ProductCreate, ProductUpdate
from product_api.services.results import ErrorKind, ServiceResult


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Product not found."

# Driver-level connection failures can surface unwrapped
PERSISTENCE_ERRORS = (SQLAlchemyError, OSError)


async def _rollback_quietly(db: AsyncSession) -> None:
    try:
        await db.rollback()
    except PERSISTENCE_ERRORS:
        logger.warning("Rollback failed after persistence error", exc_info=True)


async def list_products(db: AsyncSession) -> ServiceResult[List[Product]]:
    """
    Fetch every product, ordered by id.

    Args:
        db: Database session.

    Returns:
        Result holding the (possibly empty) list of products.
    """
    try:
        result = await db.execute(select(Product).order_by(Product.id))
        products = list(result.scalars().all())
    except PERSISTENCE_ERRORS as e:
        logger.exception("Failed to list products")
        return ServiceResult.failure(ErrorKind.INTERNAL, str(e))

    return ServiceResult.success(products)


async def get_product(db: AsyncSession, product_id: int) -> ServiceResult[Product]:
    """
    Fetch a single product by primary key.

    Args:
        db: Database session.
        product_id: Product ID.

    Returns:
        Result holding the product, or NOT_FOUND.
    """
    try:
        product: Optional[Product] = await db.get(Product, product_id)
    except PERSISTENCE_ERRORS as e:
        logger.exception(f"Failed to load product {product_id}")
        return ServiceResult.failure(ErrorKind.INTERNAL, str(e))

    if product is None:
        return ServiceResult.failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

    return ServiceResult.success(product)


async def create_product(
    db: AsyncSession,
    data: Optional[ProductCreate],
) -> ServiceResult[Product]:
    """
    Insert a new product.

    Args:
        db: Database session.
        data: Validated product fields, or None when the request had no body.

    Returns:
        Result holding the stored product with its generated id, or INVALID
        when no data was supplied.
    """
    if data is None:
        return ServiceResult.failure(ErrorKind.INVALID, "Invalid product data.")

    product = Product(
        name=data.name,
        description=data.description,
        price=data.price,
    )

    try:
        db.add(product)
        await db.commit()
        await db.refresh(product)
    except PERSISTENCE_ERRORS as e:
        logger.exception("Failed to create product")
        await _rollback_quietly(db)
        return ServiceResult.failure(ErrorKind.INTERNAL, str(e))

    logger.info(f"Created product {product.id}")
    return ServiceResult.success(product)


async def update_product(
    db: AsyncSession,
    product_id: int,
    data: Optional[ProductUpdate],
) -> ServiceResult[Product]:
    """
    Overwrite name, description and price of an existing product.

    Nothing is written when the product does not exist.

    Args:
        db: Database session.
        product_id: Product ID.
        data: New field values, or None when the request had no body.

    Returns:
        Result holding the updated product, NOT_FOUND, or INVALID.
    """
    if data is None:
        return ServiceResult.failure(ErrorKind.INVALID, "Invalid product data.")

    try:
        product = await db.get(Product, product_id)
        if product is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        product.name = data.name
        product.description = data.description
        product.price = data.price

        await db.commit()
    except PERSISTENCE_ERRORS as e:
        logger.exception(f"Failed to update product {product_id}")
        await _rollback_quietly(db)
        return ServiceResult.failure(ErrorKind.INTERNAL, str(e))

    logger.info(f"Updated product {product_id}")
    return ServiceResult.success(product)


async def delete_product(db: AsyncSession, product_id: int) -> ServiceResult[None]:
    """
    Remove a product.

    Args:
        db: Database session.
        product_id: Product ID.

    Returns:
        Empty success result, or NOT_FOUND.
    """
    try:
        product = await db.get(Product, product_id)
        if product is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        await db.delete(product)
        await db.commit()
    except PERSISTENCE_ERRORS as e:
        logger.exception(f"Failed to delete product {product_id}")
        await _rollback_quietly(db)
        return ServiceResult.failure(ErrorKind.INTERNAL, str(e))

    logger.info(f"Deleted product {product_id}")
    return ServiceResult.success()
