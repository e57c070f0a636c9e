"""
Business logic services.

Each service composes one engine with settings and logging, and builds
the payloads handed to the external persistence procedures.
"""

from services.production_service import ProductionService, get_production_service
from services.transfer_service import TransferService, get_transfer_service
from services.inventory_count_service import (
    InventoryCountService,
    get_inventory_count_service,
)

__all__ = [
    "ProductionService",
    "get_production_service",
    "TransferService",
    "get_transfer_service",
    "InventoryCountService",
    "get_inventory_count_service",
]
