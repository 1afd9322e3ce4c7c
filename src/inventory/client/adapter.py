"""Normalize API responses into the view model the terminal UI renders.

The adapter accepts either naming convention so the UI does not care whether
a record says ``product_name``/``stock_qty`` (storage naming) or
``name``/``quantity`` (presentation naming).

Fallback order, per field:

- ``name``: ``product_name`` if present and non-empty, else ``name``, else ``""``
- ``description``: ``description``, else ``""``
- ``price``: passed through untouched; formatting happens at display time
- ``quantity``: ``stock_qty`` if present and not null, else ``quantity``, else ``0``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


@dataclass(frozen=True)
class ProductView:
    """UI-only projection of a product. Never sent back to the server verbatim."""

    id: Any
    name: str
    description: str
    price: Any
    quantity: Any


def _first_present(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return default


def extract_records(body: Any) -> list[Mapping[str, Any]]:
    """Unwrap the ``data`` envelope, tolerating bodies that have none.

    A body without a ``data`` key is itself treated as the payload; a single
    object becomes a one-element list.
    """
    payload = body
    if isinstance(body, Mapping) and body.get("data") is not None:
        payload = body["data"]

    if payload is None:
        return []
    if isinstance(payload, Mapping):
        return [payload]
    if isinstance(payload, list):
        return [record for record in payload if isinstance(record, Mapping)]
    return []


def to_view_model(raw: Mapping[str, Any]) -> ProductView:
    return ProductView(
        id=raw.get("id"),
        name=str(raw.get("product_name") or raw.get("name") or ""),
        description=_first_present(raw, "description", default=""),
        price=raw.get("price"),
        quantity=_first_present(raw, "stock_qty", "quantity", default=0),
    )


def adapt_products(body: Any) -> list[ProductView]:
    """Turn a raw List/Get response body into view models."""
    return [to_view_model(record) for record in extract_records(body)]


def format_price(price: Any, currency_symbol: str = "₱") -> str:
    """Render a price with two fraction digits; unparseable values show as zero."""
    if price is None or isinstance(price, bool):
        amount = Decimal(0)
    else:
        try:
            amount = Decimal(str(price).strip() or "0")
        except InvalidOperation:
            amount = Decimal(0)
        if not amount.is_finite():
            amount = Decimal(0)
    return f"{currency_symbol}{amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}"
