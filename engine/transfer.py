"""
Transfer engine.

Validates proposed transfer lines and the route they travel on. Only the
direct edges of the industrial flow are legal; CD -> PMP is rejected
even though CD -> PCP -> PMP is a valid path.
"""

from collections.abc import Sequence
from typing import Optional

from config.flow import TRANSFER_ROUTE_EDGES
from engine.validation import ErrorCollector
from models.transfer import TransferLineInput, TransferRoute
from models.validation import TransferValidationResult


VALID_TRANSFER_ROUTES: tuple[TransferRoute, ...] = tuple(
    TransferRoute(from_location=from_location, to_location=to_location, label=label)
    for from_location, to_location, label in TRANSFER_ROUTE_EDGES
)

_ROUTE_PAIRS: frozenset[tuple[str, str]] = frozenset(
    (route.from_location, route.to_location) for route in VALID_TRANSFER_ROUTES
)


def is_valid_route(from_location: str, to_location: str) -> bool:
    """Exact, case-sensitive match against the route table."""
    return (from_location, to_location) in _ROUTE_PAIRS


def get_route(from_location: str, to_location: str) -> Optional[TransferRoute]:
    """Labelled route for a pair, None when the pair is not sanctioned."""
    for route in VALID_TRANSFER_ROUTES:
        if route.from_location == from_location and route.to_location == to_location:
            return route
    return None


def routes_from(location: str) -> list[TransferRoute]:
    """Outgoing routes of a location, in flow order."""
    return [route for route in VALID_TRANSFER_ROUTES if route.from_location == location]


def validate_transfer_items(items: Sequence[TransferLineInput]) -> TransferValidationResult:
    """
    Validate transfer lines before a request is created.

    Rules, reported for every item in order:
        - at least one item
        - quantity > 0
        - equivalent_kg <= available_kg
    """
    errors = ErrorCollector()

    if not items:
        errors.add("Nenhum item para transferir")

    for item in items:
        if not item.quantity > 0:
            errors.add(f"{item.product_name}: quantidade deve ser positiva")
        if item.equivalent_kg > item.available_kg:
            errors.add(
                f"{item.product_name}: estoque insuficiente "
                f"({item.available_kg:.1f}kg disponível, "
                f"{item.equivalent_kg:.1f}kg necessário)"
            )

    return errors.build(TransferValidationResult)
