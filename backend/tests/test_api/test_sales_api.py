"""
API tests for the Sales API routers

FastAPI TestClient with get_db overridden to the in-memory test session.

Author: TM3
Date: 2025-10-17
"""
from datetime import timedelta
from uuid import uuid4

from sales_api.domain.common import utc_now


def sale_payload(branch, customer, product, number="S-0001", quantity=2):
    return {
        "sale_number": number,
        "sale_date": (utc_now() - timedelta(hours=1)).isoformat(),
        "customer_id": str(customer.id),
        "branch_id": str(branch.id),
        "items": [
            {"product_id": str(product.id), "quantity": quantity, "unit_price": "10.00", "discount": "0"}
        ]
    }


class TestRootEndpoints:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "online"


class TestProductsApi:

    def test_create_product(self, client):
        response = client.post("/api/v1/products/", json={"name": "Cerveza IPA", "price": "12.90"})

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["data"]["name"] == "Cerveza IPA"
        assert float(body["data"]["price"]) == 12.90

    def test_create_product_validation_envelope(self, client):
        response = client.post("/api/v1/products/", json={"name": "", "price": "0"})

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == "error"
        assert body["message"] == "Validation failed"
        assert {"field": "price", "message": "Product price must be greater than zero"} in body["errors"]
        assert {"field": "name", "message": "Product name is required"} in body["errors"]

    def test_list_products_paging_metadata(self, client, product, inactive_product):
        response = client.get("/api/v1/products/", params={"page": 1, "size": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 2
        assert body["total_pages"] == 2
        assert body["has_next"] is True
        assert body["has_previous"] is False
        assert len(body["data"]) == 1

    def test_list_products_size_too_large(self, client):
        response = client.get("/api/v1/products/", params={"size": 101})

        assert response.status_code == 400
        assert response.json()["errors"] == [{"field": "size", "message": "Size cannot exceed 100"}]

    def test_update_product(self, client, product):
        response = client.put(
            f"/api/v1/products/{product.id}",
            json={"name": "Cerveza Lager 473ml", "price": "13.50", "is_active": True}
        )

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Cerveza Lager 473ml"

    def test_get_missing_product(self, client):
        missing = uuid4()

        response = client.get(f"/api/v1/products/{missing}")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": f"Product with ID {missing} not found"}

    def test_malformed_id(self, client):
        response = client.get("/api/v1/products/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["status"] == "error"

    def test_delete_product(self, client, product):
        response = client.delete(f"/api/v1/products/{product.id}")

        assert response.status_code == 200
        assert client.get(f"/api/v1/products/{product.id}").status_code == 404


class TestBranchesAndCustomersApi:

    def test_branch_crud(self, client):
        created = client.post("/api/v1/branches/", json={"name": "Centro"}).json()["data"]

        updated = client.put(f"/api/v1/branches/{created['id']}", json={"name": "Centro Sur"})
        listed = client.get("/api/v1/branches/", params={"name": "sur"})

        assert updated.status_code == 200
        assert listed.json()["data"][0]["name"] == "Centro Sur"
        assert client.delete(f"/api/v1/branches/{created['id']}").status_code == 200

    def test_customer_email_conflict(self, client, customer):
        response = client.post("/api/v1/customers/", json={"name": "Otra", "email": customer.email})

        assert response.status_code == 409
        assert response.json()["message"] == f"Customer with email {customer.email} already exists"

    def test_customer_with_sales_cannot_be_deleted(self, client, branch, customer, product):
        client.post("/api/v1/sales/", json=sale_payload(branch, customer, product))

        response = client.delete(f"/api/v1/customers/{customer.id}")

        assert response.status_code == 409
        assert response.json()["status"] == "error"
        assert client.get(f"/api/v1/customers/{customer.id}").status_code == 200


class TestUsersApi:

    def test_create_user_never_returns_password(self, client):
        response = client.post("/api/v1/users/", json={
            "username": "maria",
            "email": "maria@mail.com",
            "password": "Secret#123",
            "role": "Admin"
        })

        assert response.status_code == 201
        data = response.json()["data"]
        assert "password" not in data
        assert data["role"] == "Admin"
        assert data["status"] == "Active"

        fetched = client.get(f"/api/v1/users/{data['id']}")
        assert "password" not in fetched.json()["data"]

    def test_unknown_role_rejected(self, client):
        response = client.post("/api/v1/users/", json={
            "username": "maria",
            "email": "maria@mail.com",
            "password": "Secret#123",
            "role": "Owner"
        })

        assert response.status_code == 400


class TestSalesApi:

    def test_create_sale(self, client, branch, customer, product):
        response = client.post("/api/v1/sales/", json=sale_payload(branch, customer, product))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "Pending"
        assert float(data["total_amount"]) == 20.0
        assert len(data["items"]) == 1

    def test_unknown_customer_is_not_found(self, client, branch, customer, product):
        payload = sale_payload(branch, customer, product)
        payload["customer_id"] = str(uuid4())

        response = client.post("/api/v1/sales/", json=payload)

        assert response.status_code == 404
        assert response.json()["message"] == f"Customer with ID {payload['customer_id']} not found"

    def test_duplicate_sale_number(self, client, branch, customer, product):
        client.post("/api/v1/sales/", json=sale_payload(branch, customer, product))

        response = client.post("/api/v1/sales/", json=sale_payload(branch, customer, product))

        assert response.status_code == 409

    def test_item_quantity_limit(self, client, branch, customer, product):
        response = client.post("/api/v1/sales/", json=sale_payload(branch, customer, product, quantity=21))

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "items[0].quantity", "message": "Quantity cannot exceed 20 items per sale item"}
        ]

    def test_close_sale_with_discount(self, client, branch, customer, product):
        sale = client.post(
            "/api/v1/sales/", json=sale_payload(branch, customer, product, quantity=10)
        ).json()["data"]

        response = client.patch(f"/api/v1/sales/{sale['id']}/status", json={"status": "Closed"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "Closed"
        assert float(data["total_amount"]) == 80.0
        assert float(data["items"][0]["discount"]) == 20.0

    def test_status_transition_rule_is_bad_request(self, client, branch, customer, product):
        sale = client.post("/api/v1/sales/", json=sale_payload(branch, customer, product)).json()["data"]

        response = client.patch(f"/api/v1/sales/{sale['id']}/status", json={"status": "Pending"})

        assert response.status_code == 400
        assert response.json()["message"] == "Sale is not cancelled"

    def test_list_sales_by_status(self, client, branch, customer, product):
        sale = client.post("/api/v1/sales/", json=sale_payload(branch, customer, product)).json()["data"]
        client.put(f"/api/v1/sales/{sale['id']}", json={
            "sale_number": sale["sale_number"],
            "sale_date": sale["sale_date"],
            "customer_id": sale["customer_id"],
            "branch_id": sale["branch_id"],
            "status": "Cancelled"
        })

        response = client.get("/api/v1/sales/", params={"status": "Cancelled"})

        assert response.json()["total_count"] == 1
        assert response.json()["data"][0]["status"] == "Cancelled"

    def test_sale_item_endpoints(self, client, branch, customer, product):
        # Arrange
        sale = client.post("/api/v1/sales/", json=sale_payload(branch, customer, product)).json()["data"]
        items_url = f"/api/v1/sales/{sale['id']}/items"

        # Act: add, update, list, delete
        added = client.post(items_url, json={
            "product_id": str(product.id), "quantity": 1, "unit_price": "7.50", "discount": "0"
        })
        item_id = added.json()["data"]["id"]
        updated = client.put(f"{items_url}/{item_id}", json={"product_id": str(product.id), "quantity": 3})
        listed = client.get(items_url)
        deleted = client.delete(f"{items_url}/{item_id}")

        # Assert
        assert added.status_code == 201
        assert float(added.json()["data"]["unit_price"]) == 7.5
        assert float(updated.json()["data"]["unit_price"]) == 10.0
        assert float(updated.json()["data"]["total_amount"]) == 30.0
        assert listed.json()["total_count"] == 2
        assert deleted.status_code == 200
        assert client.get(f"{items_url}/{item_id}").status_code == 404

    def test_delete_missing_sale(self, client):
        response = client.delete(f"/api/v1/sales/{uuid4()}")

        assert response.status_code == 404
