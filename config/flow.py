"""
Industrial flow configuration.

Stock-holding locations and the sanctioned movements between them.
The topology is fixed: CD -> PCP -> PMP -> FABRICA.
"""

# =============================================================================
# LOCATION CODES
# =============================================================================
# Case-sensitive, shared with the caller's location identifiers

# Distribution center: raw material arrives here
LOCATION_CD = "CD"

# Production control point: material staged for mixing
LOCATION_PCP = "PCP"

# Production mixing point: compound is produced here
LOCATION_PMP = "PMP"

# Factory floor: final destination of produced compound
LOCATION_FACTORY = "FABRICA"

LOCATION_CODES = (LOCATION_CD, LOCATION_PCP, LOCATION_PMP, LOCATION_FACTORY)


# =============================================================================
# TRANSFER ROUTES
# =============================================================================
# (from, to, label) in flow order. No multi-hop edges.

TRANSFER_ROUTE_EDGES = (
    (LOCATION_CD, LOCATION_PCP, "CD → PCP"),
    (LOCATION_PCP, LOCATION_PMP, "PCP → PMP (Produção)"),
    (LOCATION_PMP, LOCATION_FACTORY, "PMP → Fábrica"),
)

# Production draws its components from this location
PRODUCTION_SOURCE_LOCATION = LOCATION_PCP
