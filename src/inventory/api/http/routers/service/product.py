"""Product API router with CRUD operations.

Requests use the client naming (``name``, ``quantity``); responses carry the
storage naming (``product_name``, ``stock_qty``) inside a ``data`` envelope.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from loguru import logger
from sqlmodel import Session

from src.inventory.api.http.deps import get_db_session
from src.inventory.api.http.responses import (
    DataEnvelope,
    MessageEnvelope,
    MutationEnvelope,
)
from src.inventory.core.errors import NotFoundError
from src.inventory.entities.service.product import (
    Product,
    ProductPayload,
    ProductRepository,
)

router = APIRouter(prefix="/products", tags=["products"])

RawPayload = Annotated[Any, Body()]


@router.get("", response_model=DataEnvelope[list[Product]])
@router.get("/", response_model=DataEnvelope[list[Product]], include_in_schema=False)
def list_products(
    session: Session = Depends(get_db_session),
) -> DataEnvelope[list[Product]]:
    """List all live products."""
    repository = ProductRepository(session)
    return DataEnvelope(data=repository.list_all())


@router.get("/{item_id}", response_model=DataEnvelope[Product])
@router.get("/{item_id}/", response_model=DataEnvelope[Product], include_in_schema=False)
def get_product(
    item_id: str,
    session: Session = Depends(get_db_session),
) -> DataEnvelope[Product]:
    """Get a live product by ID."""
    repository = ProductRepository(session)
    product = repository.get(item_id)
    if product is None:
        raise NotFoundError("Product", item_id)
    return DataEnvelope(data=product)


@router.post(
    "",
    response_model=MutationEnvelope[Product],
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/",
    response_model=MutationEnvelope[Product],
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_product(
    payload: RawPayload = None,
    session: Session = Depends(get_db_session),
) -> MutationEnvelope[Product]:
    """Create a new product."""
    fields = ProductPayload.parse(payload).to_storage_fields()

    repository = ProductRepository(session)
    product = repository.create(fields)
    session.commit()

    logger.bind(product_id=product.id).info("product.created")
    return MutationEnvelope(message="Product created successfully", data=product)


@router.put("/{item_id}", response_model=MutationEnvelope[Product])
@router.put("/{item_id}/", response_model=MutationEnvelope[Product], include_in_schema=False)
def update_product(
    item_id: str,
    payload: RawPayload = None,
    session: Session = Depends(get_db_session),
) -> MutationEnvelope[Product]:
    """Overwrite every mutable field of a product.

    The id is resolved before the payload is validated, so an unknown id
    answers 404 even when the body is also invalid.
    """
    repository = ProductRepository(session)
    if repository.get(item_id) is None:
        raise NotFoundError("Product", item_id)

    fields = ProductPayload.parse(payload).to_storage_fields()
    product = repository.update(item_id, fields)
    session.commit()

    logger.bind(product_id=product.id).info("product.updated")
    return MutationEnvelope(message="Product updated successfully", data=product)


@router.delete("/{item_id}", response_model=MessageEnvelope)
@router.delete("/{item_id}/", response_model=MessageEnvelope, include_in_schema=False)
def delete_product(
    item_id: str,
    session: Session = Depends(get_db_session),
) -> MessageEnvelope:
    """Soft-delete a product."""
    repository = ProductRepository(session)
    if not repository.soft_delete(item_id):
        raise NotFoundError("Product", item_id)
    session.commit()

    logger.bind(product_id=item_id).info("product.deleted")
    return MessageEnvelope(message="Product deleted successfully")
