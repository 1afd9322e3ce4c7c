"""Explicit UI state and the pure transitions applied to it.

Every function here takes a state and returns a new one; nothing performs I/O,
so transitions can be exercised without rendering or a server.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from src.inventory.client.adapter import ProductView

FORM_FIELDS = ("name", "description", "price", "quantity")


@dataclass(frozen=True)
class FormData:
    """Draft values of the add/edit form, kept as the user typed them."""

    name: str = ""
    description: str = ""
    price: Any = ""
    quantity: Any = ""

    @classmethod
    def from_product(cls, product: ProductView) -> FormData:
        return cls(
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
        )

    def to_payload(self) -> dict[str, Any]:
        """Request body for create/update, in presentation naming."""
        return {name: getattr(self, name) for name in FORM_FIELDS}


@dataclass(frozen=True)
class InventoryState:
    products: tuple[ProductView, ...] = ()
    search_term: str = ""
    loading: bool = False
    form_data: FormData = field(default_factory=FormData)
    editing_target: ProductView | None = None

    @property
    def filtered_products(self) -> list[ProductView]:
        return filter_products(self.products, self.search_term)

    @property
    def is_editing(self) -> bool:
        return self.editing_target is not None

    @property
    def action(self) -> str:
        """Verb shown on the submit button and in the confirmation."""
        return "update" if self.is_editing else "add"


def filter_products(products: Sequence[ProductView], term: str) -> list[ProductView]:
    """Case-insensitive substring match on name. An empty term keeps everything."""
    needle = term.lower()
    return [product for product in products if needle in product.name.lower()]


def set_products(state: InventoryState, products: Iterable[ProductView]) -> InventoryState:
    return replace(state, products=tuple(products), loading=False)


def set_loading(state: InventoryState, loading: bool) -> InventoryState:
    return replace(state, loading=loading)


def set_search_term(state: InventoryState, term: str) -> InventoryState:
    return replace(state, search_term=term)


def set_form_field(state: InventoryState, name: str, value: Any) -> InventoryState:
    if name not in FORM_FIELDS:
        raise KeyError(f"Unknown form field: {name}")
    return replace(state, form_data=replace(state.form_data, **{name: value}))


def start_edit(state: InventoryState, product: ProductView) -> InventoryState:
    return replace(state, editing_target=product, form_data=FormData.from_product(product))


def start_add(state: InventoryState) -> InventoryState:
    return replace(state, editing_target=None, form_data=FormData())


# Cancelling an edit lands on the same blank "add" form.
cancel_edit = start_add


def remove_product(state: InventoryState, item_id: Any) -> InventoryState:
    return replace(
        state, products=tuple(p for p in state.products if p.id != item_id)
    )
