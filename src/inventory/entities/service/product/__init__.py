"""Entity package: Product."""

from .entity import Product, quantize_price
from .payload import ProductPayload
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductPayload",
    "ProductRepository",
    "ProductTable",
    "quantize_price",
]
