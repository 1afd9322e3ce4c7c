"""Terminal client for the product API."""

from .adapter import ProductView, adapt_products, extract_records, format_price, to_view_model
from .api_client import InventoryApiClient
from .controller import InventoryController
from .state import FormData, InventoryState, filter_products

__all__ = [
    "FormData",
    "InventoryApiClient",
    "InventoryController",
    "InventoryState",
    "ProductView",
    "adapt_products",
    "extract_records",
    "filter_products",
    "format_price",
    "to_view_model",
]
