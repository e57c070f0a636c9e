"""
Stock snapshot schemas.

The real balance lives in the external storage system; a snapshot is
supplied fresh for every calculation.
"""

from collections.abc import Iterable
from pydantic import Field

from models.base import BaseSchema


class StockBalance(BaseSchema):
    """Stock row as read from storage: one product at one location."""

    product_id: str
    location_code: str
    total_kg: float


class StockSnapshot(BaseSchema):
    """Available kg per product at a single location."""

    location_code: str = Field(..., description="Location the balances belong to")
    balances: dict[str, float] = Field(
        default_factory=dict,
        description="product_id -> available kg"
    )

    def available(self, product_id: str) -> float:
        """Available kg for a product, 0 when the location holds none."""
        return self.balances.get(product_id, 0.0)

    @classmethod
    def from_rows(cls, rows: Iterable[StockBalance], location_code: str) -> "StockSnapshot":
        """
        Build a snapshot from stock rows, keeping only one location.

        Later rows for the same product replace earlier ones.
        """
        balances = {
            row.product_id: row.total_kg
            for row in rows
            if row.location_code == location_code
        }
        return cls(location_code=location_code, balances=balances)
