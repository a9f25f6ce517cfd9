"""Tests for customers API endpoints."""

CUSTOMER_FIELDS = [
    "id",
    "customer_no",
    "name",
    "date",
    "address",
    "model",
    "sale_type",
    "officer_id",
    "officer_name",
    "business",
    "visit_completed",
    "customer_type",
    "field_visit_notes",
    "booking_info",
    "delivery_info",
]


def customer_payload(**overrides) -> dict:
    payload = {
        "id": "c-1",
        "customer_no": "C-0001",
        "name": "Nimal Fernando",
        "date": "2024-01-15",
        "address": "12 Lake Road",
        "model": "Scooter X",
        "sale_type": "Cash",
        "officer_id": "o-1",
        "officer_name": "Ann Lee",
        "business": "Acme",
        "visit_completed": "Yes",
        "customer_type": "Hot",
        "field_visit_notes": "Wants a test ride",
        "booking_info": "Booked 2024-01-20",
        "delivery_info": None,
    }
    payload.update(overrides)
    return payload


class TestListCustomers:
    """Test GET /api/customers."""

    def test_empty(self, client):
        response = client.get("/api/customers")

        assert response.status_code == 200
        assert response.json() == []

    def test_rows_have_every_column(self, client):
        client.post("/api/customers", json=customer_payload())

        [row] = client.get("/api/customers").json()
        assert sorted(row) == sorted(CUSTOMER_FIELDS)
        assert row == customer_payload()

    def test_filter_by_business(self, client):
        client.post("/api/customers", json=customer_payload(id="c-1", business="Acme"))
        client.post("/api/customers", json=customer_payload(id="c-2", business="Globex"))
        client.post("/api/customers", json=customer_payload(id="c-3", business="Acme"))

        acme = client.get("/api/customers", params={"business": "Acme"}).json()
        globex = client.get("/api/customers", params={"business": "Globex"}).json()
        everyone = client.get("/api/customers").json()

        assert {c["id"] for c in acme} == {"c-1", "c-3"}
        assert all(c["business"] == "Acme" for c in acme)
        assert {c["id"] for c in globex} == {"c-2"}
        assert {c["id"] for c in everyone} == {c["id"] for c in acme + globex}

    def test_empty_business_param_returns_all(self, client):
        client.post("/api/customers", json=customer_payload(id="c-1", business="Acme"))
        client.post("/api/customers", json=customer_payload(id="c-2", business="Globex"))

        response = client.get("/api/customers?business=")

        assert len(response.json()) == 2

    def test_unknown_business_returns_empty(self, client):
        client.post("/api/customers", json=customer_payload())

        assert client.get("/api/customers", params={"business": "Nobody"}).json() == []


class TestSaveCustomer:
    """Test POST /api/customers."""

    def test_create(self, client):
        response = client.post("/api/customers", json=customer_payload())

        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_last_write_wins(self, client):
        client.post("/api/customers", json=customer_payload(name="First", customer_type="Hot"))
        client.post(
            "/api/customers",
            json={"id": "c-1", "name": "Second", "business": "Acme", "visit_completed": "Yes"},
        )

        rows = client.get("/api/customers", params={"business": "Acme"}).json()
        assert len(rows) == 1
        assert rows[0]["name"] == "Second"
        assert rows[0]["customer_type"] is None
        assert rows[0]["address"] is None

    def test_visit_completed_defaults_when_omitted(self, client):
        payload = customer_payload()
        del payload["visit_completed"]

        client.post("/api/customers", json=payload)

        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "No"

    def test_visit_completed_defaults_when_empty(self, client):
        client.post("/api/customers", json=customer_payload(visit_completed=""))

        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "No"

    def test_visit_completed_defaults_when_null(self, client):
        client.post("/api/customers", json=customer_payload(visit_completed=None))

        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "No"

    def test_visit_completed_defaults_when_zero(self, client):
        response = client.post("/api/customers", json=customer_payload(visit_completed=0))

        assert response.status_code == 200
        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "No"

    def test_visit_completed_defaults_when_false(self, client):
        response = client.post("/api/customers", json=customer_payload(visit_completed=False))

        assert response.status_code == 200
        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "No"

    def test_visit_completed_true_stored_as_text(self, client):
        client.post("/api/customers", json=customer_payload(visit_completed=True))

        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "true"

    def test_repost_resets_visit_completed(self, client):
        client.post("/api/customers", json=customer_payload(visit_completed="Yes"))
        client.post("/api/customers", json=customer_payload(visit_completed=""))

        [row] = client.get("/api/customers").json()
        assert row["visit_completed"] == "No"

    def test_numeric_id_coerced_to_string(self, client):
        client.post("/api/customers", json=customer_payload(id=1705312345678))

        [row] = client.get("/api/customers").json()
        assert row["id"] == "1705312345678"

        client.delete("/api/customers/1705312345678")
        assert client.get("/api/customers").json() == []

    def test_unknown_fields_ignored(self, client):
        response = client.post("/api/customers", json=customer_payload(colour="red"))

        assert response.status_code == 200
        [row] = client.get("/api/customers").json()
        assert "colour" not in row

    def test_missing_id_is_store_error(self, client):
        payload = customer_payload()
        del payload["id"]

        response = client.post("/api/customers", json=payload)

        assert response.status_code == 500
        assert "customers.id" in response.json()["error"]
        assert client.get("/api/customers").json() == []


class TestDeleteCustomer:
    """Test DELETE /api/customers/{customer_id}."""

    def test_delete(self, client):
        client.post("/api/customers", json=customer_payload(id="c-1"))
        client.post("/api/customers", json=customer_payload(id="c-2"))

        response = client.delete("/api/customers/c-1")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert [c["id"] for c in client.get("/api/customers").json()] == ["c-2"]

    def test_delete_twice_is_idempotent(self, client):
        client.post("/api/customers", json=customer_payload())

        first = client.delete("/api/customers/c-1")
        second = client.delete("/api/customers/c-1")

        assert first.status_code == 200
        assert first.json() == {"success": True}
        assert second.status_code == 200
        assert second.json() == {"success": True}
