"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model exchanged over the API
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.product import Product, ProductPayload, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductPayload",
    "ProductRepository",
    "ProductTable",
]
