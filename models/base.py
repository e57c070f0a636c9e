"""
Base schema for all models.

Every record handled by the engines is a value object: built fresh per
call and never mutated afterwards.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - Immutable after construction (frozen)
        - Allow ORM/attribute objects (from_attributes)
        - Strings kept verbatim (display names flow into messages)
    """
    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
    )
