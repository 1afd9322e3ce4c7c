"""HTTP contract of the product routes."""

from fastapi.testclient import TestClient


def _create(client: TestClient, payload: dict) -> dict:
    response = client.post("/api/products", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestListProducts:
    def test_empty_list(self, client: TestClient):
        response = client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_list_in_id_order(self, client: TestClient, pen_payload):
        first = _create(client, pen_payload)
        second = _create(client, {**pen_payload, "name": "Mug"})

        data = client.get("/api/products").json()["data"]

        assert [row["id"] for row in data] == [first["id"], second["id"]]
        assert [row["product_name"] for row in data] == ["Pen", "Mug"]


class TestCreateProduct:
    def test_create_returns_storage_naming(self, client: TestClient, pen_payload):
        response = client.post("/api/products", json=pen_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Product created successfully"
        data = body["data"]
        assert data["product_name"] == "Pen"
        assert data["description"] == "Blue ink"
        assert data["price"] == "12.50"
        assert data["stock_qty"] == 100
        assert isinstance(data["id"], int)
        assert data["created_at"]
        assert data["updated_at"]

    def test_create_accepts_numeric_strings(self, client: TestClient):
        data = _create(
            client, {"name": "Pen", "description": "Blue ink", "price": "7", "quantity": "2"}
        )

        assert data["price"] == "7.00"
        assert data["stock_qty"] == 2

    def test_missing_fields(self, client: TestClient):
        response = client.post("/api/products", json={})

        assert response.status_code == 422
        body = response.json()
        assert set(body["errors"]) == {"name", "description", "price", "quantity"}
        assert body["errors"]["name"] == ["The name field is required."]
        assert body["message"] == "The name field is required. (and 3 more errors)"

    def test_malformed_json(self, client: TestClient):
        response = client.post(
            "/api/products",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert "errors" in response.json()


class TestGetProduct:
    def test_get_is_idempotent(self, client: TestClient, pen_payload):
        created = _create(client, pen_payload)

        first = client.get(f"/api/products/{created['id']}")
        second = client.get(f"/api/products/{created['id']}")

        assert first.status_code == 200
        assert first.content == second.content
        assert first.json()["data"]["price"] == "12.50"

    def test_unknown_id(self, client: TestClient):
        response = client.get("/api/products/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    def test_non_numeric_id_is_not_found(self, client: TestClient):
        response = client.get("/api/products/abc")

        assert response.status_code == 404

    def test_unicode_digit_id_is_not_found(self, client: TestClient, pen_payload):
        """Superscript two is a digit to ``str.isdigit`` but not an integer."""
        assert client.get("/api/products/%C2%B2").status_code == 404
        assert client.put("/api/products/%C2%B2", json=pen_payload).status_code == 404
        assert client.delete("/api/products/%C2%B2").status_code == 404


class TestUpdateProduct:
    def test_update_overwrites_fields(self, client: TestClient, pen_payload):
        created = _create(client, pen_payload)

        response = client.put(
            f"/api/products/{created['id']}", json={**pen_payload, "quantity": 90}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product updated successfully"
        assert body["data"]["id"] == created["id"]
        assert body["data"]["stock_qty"] == 90

    def test_invalid_update_leaves_record_unchanged(self, client: TestClient, pen_payload):
        created = _create(client, pen_payload)

        response = client.put(
            f"/api/products/{created['id']}", json={**pen_payload, "price": -1}
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"price": ["The price field must be at least 0."]}
        current = client.get(f"/api/products/{created['id']}").json()["data"]
        assert current["price"] == "12.50"

    def test_unknown_id_wins_over_invalid_body(self, client: TestClient):
        response = client.put("/api/products/999", json={"price": "nope"})

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}


class TestDeleteProduct:
    def test_delete_then_get_is_not_found(self, client: TestClient, pen_payload):
        created = _create(client, pen_payload)

        response = client.delete(f"/api/products/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully"}
        assert client.get(f"/api/products/{created['id']}").status_code == 404
        assert client.get("/api/products").json() == {"data": []}

    def test_delete_twice(self, client: TestClient, pen_payload):
        created = _create(client, pen_payload)
        client.delete(f"/api/products/{created['id']}")

        response = client.delete(f"/api/products/{created['id']}")

        assert response.status_code == 404

    def test_update_after_delete(self, client: TestClient, pen_payload):
        created = _create(client, pen_payload)
        client.delete(f"/api/products/{created['id']}")

        response = client.put(f"/api/products/{created['id']}", json=pen_payload)

        assert response.status_code == 404


class TestRequestMiddleware:
    def test_request_id_header(self, client: TestClient):
        response = client.get("/api/products", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestTrailingSlash:
    def test_trailing_slash_variants(self, client: TestClient, pen_payload):
        created = client.post("/api/products/", json=pen_payload)
        assert created.status_code == 201
        item_id = created.json()["data"]["id"]

        assert client.get("/api/products/").json()["data"][0]["id"] == item_id
        assert client.get(f"/api/products/{item_id}/").status_code == 200
        assert client.put(f"/api/products/{item_id}/", json=pen_payload).status_code == 200
        assert client.delete(f"/api/products/{item_id}/").status_code == 200
