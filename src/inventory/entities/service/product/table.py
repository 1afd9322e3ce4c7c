"""Product database table model."""

from decimal import Decimal

import sqlalchemy as sa
from sqlmodel import Field

from src.inventory.entities.core._base import SoftDeleteTable


class ProductTable(SoftDeleteTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database, using
    the storage naming (``product_name``, ``stock_qty``). Prices are stored
    as NUMERIC(10, 2).
    """

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    product_name: str = Field(max_length=255, nullable=False)
    description: str = Field(sa_type=sa.Text, nullable=False)
    price: Decimal = Field(max_digits=10, decimal_places=2, nullable=False)
    stock_qty: int = Field(nullable=False)
