"""Response normalization into view models."""

import pytest

from src.inventory.client.adapter import (
    ProductView,
    adapt_products,
    extract_records,
    format_price,
    to_view_model,
)


class TestExtractRecords:
    def test_data_envelope(self):
        assert extract_records({"data": [{"id": 1}, {"id": 2}]}) == [{"id": 1}, {"id": 2}]

    def test_body_without_envelope(self):
        assert extract_records([{"id": 1}]) == [{"id": 1}]

    def test_single_object(self):
        assert extract_records({"data": {"id": 3}}) == [{"id": 3}]

    def test_null_data_uses_body(self):
        assert extract_records({"data": None, "id": 4}) == [{"data": None, "id": 4}]

    @pytest.mark.parametrize("body", [None, "oops", 5, {"data": "oops"}])
    def test_unusable_bodies(self, body):
        assert extract_records(body) == []


class TestToViewModel:
    def test_storage_naming(self):
        view = to_view_model(
            {"id": 1, "product_name": "Pen", "description": "Blue ink", "price": "12.50", "stock_qty": 100}
        )

        assert view == ProductView(id=1, name="Pen", description="Blue ink", price="12.50", quantity=100)

    def test_presentation_naming(self):
        view = to_view_model({"id": 2, "name": "Mug", "price": 3, "quantity": 4})

        assert view.name == "Mug"
        assert view.quantity == 4
        assert view.description == ""

    def test_storage_naming_wins_when_both_present(self):
        view = to_view_model({"id": 3, "product_name": "A", "name": "B", "stock_qty": 1, "quantity": 2})

        assert view.name == "A"
        assert view.quantity == 1

    def test_null_storage_value_falls_back(self):
        view = to_view_model({"id": 4, "product_name": None, "name": "B", "stock_qty": None})

        assert view.name == "B"
        assert view.quantity == 0

    def test_empty_storage_name_falls_back(self):
        view = to_view_model({"id": 5, "product_name": "", "name": "Pen"})

        assert view.name == "Pen"

    def test_empty_record(self):
        view = to_view_model({})

        assert view == ProductView(id=None, name="", description="", price=None, quantity=0)


def test_adapt_products_from_list_response():
    body = {"data": [{"id": 1, "product_name": "Pen", "stock_qty": 1}, "junk"]}

    assert [p.name for p in adapt_products(body)] == ["Pen"]


class TestFormatPrice:
    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            ("12.50", "₱12.50"),
            (12.5, "₱12.50"),
            (3, "₱3.00"),
            ("1.005", "₱1.01"),
            (None, "₱0.00"),
            ("", "₱0.00"),
            ("abc", "₱0.00"),
            ("NaN", "₱0.00"),
        ],
    )
    def test_format(self, price, expected):
        assert format_price(price) == expected

    def test_custom_symbol(self):
        assert format_price("2", "$") == "$2.00"
