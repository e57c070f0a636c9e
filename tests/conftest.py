"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest

from models.formulation import Formulation, FormulationItem
from models.product import Product
from tests.factories import ProductFactory, FormulationFactory


# ===================
# REFERENCE DATA
# ===================

@pytest.fixture
def bulk_product() -> Product:
    """Loose material, dispensed by exact kg."""
    return Product(**ProductFactory.create(id="prod-resina", name="RESINA PVC"))


@pytest.fixture
def sealed_bag_product() -> Product:
    """25 kg sealed bags."""
    return Product(**ProductFactory.create_sealed_bag(
        id="prod-carbonato",
        name="CARBONATO",
        package_weight=25,
    ))


@pytest.fixture
def unit_product() -> Product:
    """Counted units of 2.5 kg."""
    return Product(**ProductFactory.create(
        id="prod-estabilizante",
        name="ESTABILIZANTE",
        package_type="unit",
        unit_weight_kg=2.5,
    ))


@pytest.fixture
def formulation() -> Formulation:
    """Formulation producing 100 kg per batch."""
    return Formulation(**FormulationFactory.create(id="form-1", weight_per_batch=100))


@pytest.fixture
def formulation_items(bulk_product, sealed_bag_product) -> list[FormulationItem]:
    """60 kg resin + 30 kg carbonate per batch."""
    return [
        FormulationItem(**FormulationFactory.create_item(bulk_product.id, 60)),
        FormulationItem(**FormulationFactory.create_item(sealed_bag_product.id, 30)),
    ]


@pytest.fixture
def products_by_id(bulk_product, sealed_bag_product, unit_product) -> dict[str, Product]:
    return {p.id: p for p in (bulk_product, sealed_bag_product, unit_product)}


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client():
    """
    Create FastAPI test client.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/api/transfers/routes")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
