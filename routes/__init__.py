"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.production import router as production_router
from routes.transfers import router as transfers_router
from routes.inventory_counts import router as inventory_counts_router

__all__ = [
    "production_router",
    "transfers_router",
    "inventory_counts_router",
]
