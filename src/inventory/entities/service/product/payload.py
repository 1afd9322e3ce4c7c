"""Request payload accepted by the create and update operations.

Clients send the presentation naming (``name``, ``quantity``); the payload
knows how to turn itself into the storage naming.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from src.inventory.core.errors import PayloadValidationError
from src.inventory.entities.service.product.entity import quantize_price

# NUMERIC(10, 2) leaves eight integer digits.
MAX_PRICE = Decimal("100000000")


class ProductPayload(BaseModel):
    """Validated create/update input.

    Rules: ``name`` string, required, at most 255 characters; ``description``
    string, required; ``price`` numeric, required, >= 0; ``quantity`` integer,
    required, >= 0. Numeric strings are accepted for price and quantity since
    form inputs submit text. Blank strings count as missing.
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str, Field(strict=True, max_length=255)]
    description: Annotated[str, Field(strict=True)]
    price: Annotated[Decimal, Field(ge=0, lt=MAX_PRICE, allow_inf_nan=False)]
    quantity: Annotated[int, Field(ge=0)]

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
            if value is None or value == "":
                continue
            cleaned[key] = value
        return cleaned

    @field_validator("price", mode="before")
    @classmethod
    def _round_price_to_cents(cls, value: Any) -> Any:
        # Bounds apply to the value that will be stored
        if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
            return value
        try:
            amount = Decimal(str(value))
            if amount < 0:
                return value
            return quantize_price(amount)
        except InvalidOperation:
            return value

    @classmethod
    def parse(cls, data: Any) -> "ProductPayload":
        """Validate raw request data, raising the domain validation error."""
        try:
            return cls.model_validate(data if data is not None else {})
        except ValidationError as exc:
            raise PayloadValidationError.from_error_details(exc.errors()) from exc

    def to_storage_fields(self) -> dict[str, Any]:
        """Map client naming onto storage naming."""
        return {
            "product_name": self.name,
            "description": self.description,
            "price": quantize_price(self.price),
            "stock_qty": self.quantity,
        }
