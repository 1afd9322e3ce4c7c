"""Tests for the domain error taxonomy."""

from src.inventory.core.errors import (
    InventoryError,
    NotFoundError,
    PayloadValidationError,
    TransportError,
)


class TestNotFoundError:
    def test_message(self):
        err = NotFoundError("Product", 42)

        assert isinstance(err, InventoryError)
        assert err.message == "Product not found"
        assert err.item_id == 42


class TestPayloadValidationError:
    """Field errors and the summary message built from them."""

    def test_single_message_is_the_summary(self):
        err = PayloadValidationError({"price": ["The price field must be at least 0."]})

        assert err.message == "The price field must be at least 0."
        assert err.errors == {"price": ["The price field must be at least 0."]}

    def test_summary_counts_remaining_errors(self):
        err = PayloadValidationError(
            {
                "name": ["The name field is required."],
                "price": ["The price field is required."],
                "quantity": ["The quantity field is required."],
            }
        )

        assert err.message == "The name field is required. (and 2 more errors)"

    def test_summary_singular(self):
        err = PayloadValidationError(
            {"name": ["The name field is required."], "price": ["The price field is required."]}
        )

        assert err.message.endswith("(and 1 more error)")

    def test_empty_errors(self):
        assert PayloadValidationError({}).message == "The given data was invalid."

    def test_from_error_details_strips_body_prefix(self):
        """FastAPI locations start with ``body``; only the field name is kept."""
        err = PayloadValidationError.from_error_details(
            [
                {"loc": ("body", "price"), "type": "greater_than_equal", "ctx": {"ge": 0}, "msg": "x"},
                {"loc": ("body", "name"), "type": "missing", "msg": "Field required"},
            ]
        )

        assert err.errors == {
            "price": ["The price field must be at least 0."],
            "name": ["The name field is required."],
        }

    def test_unknown_error_type_keeps_pydantic_message(self):
        err = PayloadValidationError.from_error_details(
            [{"loc": ("body", 0), "type": "json_invalid", "msg": "JSON decode error"}]
        )

        assert err.errors == {"body": ["JSON decode error"]}


class TestTransportError:
    def test_field_errors_from_422_body(self):
        body = {"message": "bad", "errors": {"price": ["The price field must be at least 0."]}}
        err = TransportError("POST products returned 422", status_code=422, body=body)

        assert err.status_code == 422
        assert err.field_errors == {"price": ["The price field must be at least 0."]}

    def test_field_errors_without_body(self):
        assert TransportError("connection refused").field_errors == {}
