"""
API tests for the calculation endpoints.

Every endpoint is stateless, so these run against the real app.
"""

from tests.factories import (
    CountRowFactory,
    FormulationFactory,
    ProductFactory,
    TransferLineFactory,
)


# ===================
# APP
# ===================

class TestApp:

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_lists_locations(self, test_client):
        response = test_client.get("/")

        assert response.json()["locations"] == ["CD", "PCP", "PMP", "FABRICA"]


# ===================
# PRODUCTION
# ===================

def calculation_payload(batches=3, stock_kg=150) -> dict:
    """30 kg/batch of a 25 kg sealed bag on a 100 kg/batch formulation."""
    product = ProductFactory.create_sealed_bag(id="bag", name="CARBONATO", package_weight=25)
    return {
        "formulation": FormulationFactory.create(id="form-1", weight_per_batch=100),
        "items": [FormulationFactory.create_item("bag", 30)],
        "batches": batches,
        "products": [product],
        "stock": {"bag": stock_kg},
    }


class TestProductionRoutes:

    def test_calculate(self, test_client):
        response = test_client.post("/api/production/calculate", json=calculation_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["total_compound_kg"] == 300
        assert data["total_rounding_loss_kg"] == 10
        assert data["all_stock_sufficient"] is True
        assert data["items"][0]["sacks_required"] == 4
        assert data["items"][0]["adjusted_quantity_kg"] == 100

    def test_calculate_rejects_zero_batches(self, test_client):
        response = test_client.post("/api/production/calculate", json=calculation_payload(batches=0))

        assert response.status_code == 422

    def test_review_and_confirmation(self, test_client):
        summary = test_client.post(
            "/api/production/calculate", json=calculation_payload()
        ).json()

        review = test_client.post("/api/production/review", json={
            "summary": summary,
            "overrides": {"bag": 110},
        }).json()

        assert review["valid"] is False
        assert review["errors"] == [
            "CARBONATO: Deve ser múltiplo de 25kg",
            "CARBONATO: Justificativa obrigatória para ajuste manual",
        ]

        response = test_client.post("/api/production/confirmation", json={"summary": summary})

        assert response.status_code == 200
        assert response.json()["items"][0]["adjusted_quantity_kg"] == 100

    def test_confirmation_rejected_when_short(self, test_client):
        summary = test_client.post(
            "/api/production/calculate", json=calculation_payload(stock_kg=80)
        ).json()

        response = test_client.post("/api/production/confirmation", json={"summary": summary})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "PRODUCTION_NOT_CONFIRMABLE"
        assert error["details"]["errors"] == [
            "CARBONATO: estoque insuficiente (80.0kg disponível, 100.0kg necessário)",
        ]


# ===================
# TRANSFERS
# ===================

class TestTransferRoutes:

    def test_list_routes(self, test_client):
        response = test_client.get("/api/transfers/routes")

        assert response.status_code == 200
        assert [r["label"] for r in response.json()] == [
            "CD → PCP",
            "PCP → PMP (Produção)",
            "PMP → Fábrica",
        ]

    def test_check_route(self, test_client):
        ok = test_client.get("/api/transfers/routes/check", params={"from_location": "CD", "to_location": "PCP"})
        skip = test_client.get("/api/transfers/routes/check", params={"from_location": "CD", "to_location": "PMP"})

        assert ok.json()["valid"] is True
        assert skip.json()["valid"] is False

    def test_validate_collects_errors(self, test_client):
        response = test_client.post("/api/transfers/validate", json={"items": [
            TransferLineFactory.create(product_name="CARBONATO", quantity=95, available_kg=80),
        ]})

        assert response.status_code == 200
        assert response.json() == {
            "valid": False,
            "errors": ["CARBONATO: estoque insuficiente (80.0kg disponível, 95.0kg necessário)"],
        }

    def test_validate_empty(self, test_client):
        response = test_client.post("/api/transfers/validate", json={"items": []})

        assert response.json()["errors"] == ["Nenhum item para transferir"]

    def test_request_invalid_route(self, test_client):
        response = test_client.post("/api/transfers/requests", json={
            "from_location": "PCP",
            "to_location": "CD",
            "lines": [{"product": ProductFactory.create(), "quantity": 5, "available_kg": 10}],
            "requested_by": "user-1",
        })

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "TRANSFER_INVALID_ROUTE"

    def test_request_draft(self, test_client):
        product = ProductFactory.create_sealed_bag(name="CARBONATO", package_weight=25)

        response = test_client.post("/api/transfers/requests", json={
            "from_location": "CD",
            "to_location": "PCP",
            "lines": [{"product": product, "quantity": 3, "unit": "units", "available_kg": 100}],
            "requested_by": "user-1",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "pending"
        assert data["total_kg"] == 75


# ===================
# INVENTORY COUNTS
# ===================

class TestInventoryCountRoutes:

    def test_rows(self, test_client):
        response = test_client.post("/api/inventory-counts/rows", json={"entries": [
            {"product_id": "a", "system_total_kg": 500, "counted_total_kg": 480},
        ]})

        assert response.status_code == 200
        row = response.json()[0]
        assert row["difference_kg"] == -20
        assert row["needs_justification"] is True

    def test_validate(self, test_client):
        response = test_client.post("/api/inventory-counts/validate", json={"rows": [
            CountRowFactory.create(counted_total_kg=450),
            CountRowFactory.create(counted_total_kg=-1, justification="Recontar"),
        ]})

        assert response.json() == {
            "valid": False,
            "errors": [
                "Item 1: justificativa obrigatória",
                "Item 2: contagem negativa não permitida",
            ],
        }

    def test_confirmation_rejected(self, test_client):
        response = test_client.post("/api/inventory-counts/confirmation", json={
            "count_id": "count-1",
            "location_code": "PCP",
            "rows": [CountRowFactory.create(counted_total_kg=450)],
        })

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVENTORY_COUNT_VALIDATION_FAILED"

    def test_confirmation(self, test_client):
        response = test_client.post("/api/inventory-counts/confirmation", json={
            "count_id": "count-1",
            "location_code": "PCP",
            "rows": [CountRowFactory.create(system_total_kg=100, counted_total_kg=90, justification="Perda")],
        })

        assert response.status_code == 200
        item = response.json()["items"][0]
        assert item["divergence_percent"] == -10
        assert item["justification"] == "Perda"
