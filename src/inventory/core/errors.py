"""Exception taxonomy shared by the API and the terminal client."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

# pydantic error type -> message template, worded like the messages the web
# form has always shown ("The price field must be at least 0.").
_MESSAGE_TEMPLATES: dict[str, str] = {
    "missing": "The {field} field is required.",
    "string_type": "The {field} field must be a string.",
    "string_too_long": "The {field} field must not be greater than {max_length} characters.",
    "greater_than_equal": "The {field} field must be at least {ge}.",
    "less_than": "The {field} field must be less than {lt}.",
    "decimal_parsing": "The {field} field must be a number.",
    "decimal_type": "The {field} field must be a number.",
    "finite_number": "The {field} field must be a number.",
    "int_parsing": "The {field} field must be an integer.",
    "int_type": "The {field} field must be an integer.",
    "int_from_float": "The {field} field must be an integer.",
}


class InventoryError(Exception):
    """Base class for errors raised by the inventory service."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(InventoryError):
    """The referenced id has no live record."""

    def __init__(self, resource: str = "Product", item_id: Any = None) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.item_id = item_id


class PayloadValidationError(InventoryError):
    """One or more input fields failed their type, range or required rule.

    ``errors`` maps each offending field to its list of messages.
    """

    def __init__(self, errors: Mapping[str, list[str]]) -> None:
        self.errors: dict[str, list[str]] = {k: list(v) for k, v in errors.items()}
        super().__init__(self._summary(self.errors))

    @staticmethod
    def _summary(errors: Mapping[str, list[str]]) -> str:
        messages = [m for field_messages in errors.values() for m in field_messages]
        if not messages:
            return "The given data was invalid."
        remaining = len(messages) - 1
        if remaining == 0:
            return messages[0]
        noun = "error" if remaining == 1 else "errors"
        return f"{messages[0]} (and {remaining} more {noun})"

    @classmethod
    def from_error_details(
        cls, details: Iterable[Mapping[str, Any]]
    ) -> PayloadValidationError:
        """Build from pydantic/FastAPI error dictionaries (``exc.errors()``)."""
        errors: dict[str, list[str]] = {}
        for detail in details:
            field = _field_name(detail.get("loc", ()))
            errors.setdefault(field, []).append(_render_message(field, detail))
        return cls(errors)


class TransportError(InventoryError):
    """A client request failed on the network or returned a non-success status."""

    def __init__(
        self, message: str, status_code: int | None = None, body: Any = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Per-field validation messages carried by a 422 response, if any."""
        if isinstance(self.body, dict) and isinstance(self.body.get("errors"), dict):
            return self.body["errors"]
        return {}


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if p != "body" and not isinstance(p, int)]
    return parts[-1] if parts else "body"


def _render_message(field: str, detail: Mapping[str, Any]) -> str:
    template = _MESSAGE_TEMPLATES.get(detail.get("type", ""))
    if template is None:
        return str(detail.get("msg", "Invalid value."))
    ctx = {k: v for k, v in (detail.get("ctx") or {}).items()}
    try:
        return template.format(field=field, **ctx)
    except KeyError:
        return str(detail.get("msg", "Invalid value."))
