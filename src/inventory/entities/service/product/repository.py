"""Product repository: session-bound data access with soft-delete filtering."""

from typing import Any

from sqlmodel import Session, col, select

from src.inventory.core.errors import NotFoundError
from src.inventory.entities.core._base import utcnow
from src.inventory.entities.service.product.entity import Product
from src.inventory.entities.service.product.table import ProductTable

MUTABLE_FIELDS = ("product_name", "description", "price", "stock_qty")


def coerce_id(item_id: Any) -> int | None:
    """Return ``item_id`` as a positive integer, or None when it cannot be one."""
    if isinstance(item_id, bool):
        return None
    if isinstance(item_id, int):
        return item_id if item_id > 0 else None
    if isinstance(item_id, str) and item_id.isascii() and item_id.isdecimal():
        return int(item_id) or None
    return None


class ProductRepository:
    """Data-access layer for products.

    Soft-deleted rows are invisible to every method unless ``include_deleted``
    is passed. The repository flushes but never commits; the caller owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _get_row(self, item_id: Any, include_deleted: bool = False) -> ProductTable | None:
        pk = coerce_id(item_id)
        if pk is None:
            return None
        row = self._session.get(ProductTable, pk)
        if row is None or (row.is_deleted and not include_deleted):
            return None
        return row

    def get(self, item_id: Any, include_deleted: bool = False) -> Product | None:
        row = self._get_row(item_id, include_deleted)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def list_all(self, include_deleted: bool = False) -> list[Product]:
        statement = select(ProductTable).order_by(col(ProductTable.id))
        if not include_deleted:
            statement = statement.where(col(ProductTable.deleted_at).is_(None))
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def create(self, fields: dict[str, Any]) -> Product:
        row = ProductTable(**{name: fields[name] for name in MUTABLE_FIELDS})
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def update(self, item_id: Any, fields: dict[str, Any]) -> Product:
        """Overwrite every mutable field of a live product in place."""
        row = self._get_row(item_id)
        if row is None:
            raise NotFoundError("Product", item_id)

        for name in MUTABLE_FIELDS:
            setattr(row, name, fields[name])
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def soft_delete(self, item_id: Any) -> bool:
        """Stamp ``deleted_at`` on a live product. Returns False if none matched."""
        row = self._get_row(item_id)
        if row is None:
            return False
        row.deleted_at = utcnow()
        self._session.add(row)
        self._session.flush()
        return True

    def restore(self, item_id: Any) -> Product | None:
        """Bring a soft-deleted product back to life."""
        row = self._get_row(item_id, include_deleted=True)
        if row is None or not row.is_deleted:
            return None
        row.deleted_at = None
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)
