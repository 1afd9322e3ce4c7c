"""Entity: Product."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import Field, field_serializer

from src.inventory.entities.core._base import Entity

CENT = Decimal("0.01")


def quantize_price(value: Decimal | int | float | str) -> Decimal:
    """Round a price to exactly two fraction digits, half away from zero."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class Product(Entity):
    """Product as it travels over the wire, in storage naming.

    ``price`` is rendered as a string with exactly two fraction digits
    (``"12.50"``) so clients never see binary floating point drift.
    """

    product_name: str = Field(description="Display name of the product")
    description: str = Field(description="Free-form description")
    price: Decimal = Field(ge=0, description="Unit price")
    stock_qty: int = Field(ge=0, description="Units in stock")

    @field_serializer("price")
    def _serialize_price(self, price: Decimal) -> str:
        return str(quantize_price(price))

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.product_name == other.product_name
            and self.description == other.description
            and quantize_price(self.price) == quantize_price(other.price)
            and self.stock_qty == other.stock_qty
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.product_name,
            self.description,
            quantize_price(self.price),
            self.stock_qty,
        ))
