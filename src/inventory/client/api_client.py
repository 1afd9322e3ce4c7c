"""Async HTTP client for the product API."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from src.inventory.core.errors import TransportError
from src.inventory.runtime.config.config_data import ClientConfig


class InventoryApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` speaking the product routes.

    Every method returns the decoded JSON body. Network failures and
    non-success statuses raise ``TransportError``; nothing partial is ever
    returned.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None
    ) -> InventoryApiClient:
        return cls(config.base_url, timeout=config.timeout_seconds, transport=transport)

    async def __aenter__(self) -> InventoryApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, payload: Any = None) -> Any:
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            logger.bind(method=method, path=path).warning("Request failed: {}", exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = response.text

        if not response.is_success:
            logger.bind(
                method=method, path=path, status_code=response.status_code
            ).warning("Request returned an error status")
            raise TransportError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                body=body,
            )
        return body

    async def list_products(self) -> Any:
        return await self._request("GET", "products")

    async def get_product(self, item_id: Any) -> Any:
        return await self._request("GET", f"products/{item_id}")

    async def create_product(self, payload: dict[str, Any]) -> Any:
        return await self._request("POST", "products", payload)

    async def update_product(self, item_id: Any, payload: dict[str, Any]) -> Any:
        return await self._request("PUT", f"products/{item_id}", payload)

    async def delete_product(self, item_id: Any) -> Any:
        return await self._request("DELETE", f"products/{item_id}")
