"""Drives the product UI: turns user intents into API calls and state updates."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any

from loguru import logger

from src.inventory.client import state as transitions
from src.inventory.client.adapter import ProductView, adapt_products
from src.inventory.client.api_client import InventoryApiClient
from src.inventory.client.state import InventoryState
from src.inventory.core.errors import TransportError

ConfirmFn = Callable[[str], bool]
AlertFn = Callable[[str], None]

SAVE_FAILED = "Something went wrong while saving the product."
DELETE_FAILED = "Failed to delete product."


class InventoryController:
    """Owns an ``InventoryState`` and the side effects that change it.

    ``confirm`` is asked before every mutation and must return True for the
    request to be sent. ``alert`` receives user-facing failure messages.

    List fetches are numbered; a response that arrives after a newer fetch was
    issued is dropped so it cannot overwrite fresher state.
    """

    def __init__(
        self,
        client: InventoryApiClient,
        confirm: ConfirmFn,
        alert: AlertFn,
        state: InventoryState | None = None,
    ) -> None:
        self._client = client
        self._confirm = confirm
        self._alert = alert
        self.state = state or InventoryState()
        self._fetch_numbers = itertools.count(1)
        self._latest_fetch = 0

    async def mount(self) -> None:
        await self.fetch_products()

    async def fetch_products(self) -> bool:
        """Replace the product list from the server. Returns False if the result was stale."""
        fetch_no = next(self._fetch_numbers)
        self._latest_fetch = fetch_no
        self.state = transitions.set_loading(self.state, True)

        try:
            products = adapt_products(await self._client.list_products())
        except TransportError as exc:
            logger.bind(status_code=exc.status_code).error("Failed to fetch products: {}", exc)
            products = []

        if fetch_no != self._latest_fetch:
            logger.bind(fetch_no=fetch_no, latest=self._latest_fetch).debug(
                "Discarding stale product list"
            )
            return False

        self.state = transitions.set_products(self.state, products)
        return True

    def search(self, term: str) -> list[ProductView]:
        self.state = transitions.set_search_term(self.state, term)
        return self.state.filtered_products

    def set_field(self, name: str, value: Any) -> None:
        self.state = transitions.set_form_field(self.state, name, value)

    def start_edit(self, product: ProductView) -> None:
        self.state = transitions.start_edit(self.state, product)

    def start_add(self) -> None:
        self.state = transitions.start_add(self.state)

    def cancel(self) -> None:
        self.state = transitions.cancel_edit(self.state)

    def find(self, item_id: Any) -> ProductView | None:
        return next((p for p in self.state.products if p.id == item_id), None)

    async def submit(self) -> bool:
        """Create or update from the form after confirmation.

        On failure the form is left as typed so the user can correct it.
        """
        if not self._confirm(f"Are you sure you want to {self.state.action} this product?"):
            return False

        target = self.state.editing_target
        payload = self.state.form_data.to_payload()
        try:
            if target is not None:
                await self._client.update_product(target.id, payload)
            else:
                await self._client.create_product(payload)
        except TransportError as exc:
            logger.bind(
                status_code=exc.status_code, errors=exc.field_errors
            ).error("Error submitting product: {}", exc)
            self._alert(SAVE_FAILED)
            return False

        await self.fetch_products()
        self.cancel()
        return True

    async def delete(self, item_id: Any) -> bool:
        if not self._confirm("Are you sure you want to delete this product?"):
            return False

        self.state = transitions.set_loading(self.state, True)
        try:
            await self._client.delete_product(item_id)
        except TransportError as exc:
            logger.bind(status_code=exc.status_code).error("Error deleting product: {}", exc)
            self._alert(DELETE_FAILED)
            return False
        else:
            # A list fetched before this delete would bring the row back
            self._latest_fetch = next(self._fetch_numbers)
            self.state = transitions.remove_product(self.state, item_id)
            return True
        finally:
            self.state = transitions.set_loading(self.state, False)
