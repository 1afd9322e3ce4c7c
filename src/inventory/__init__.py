"""Product inventory service.

This package contains the HTTP API (FastAPI + SQLModel) that stores products
and the terminal client that lists, searches and edits them through that API.
"""

__version__ = "0.1.0"
