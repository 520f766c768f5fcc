"""
Base schemas for all models.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - Auto-trim whitespace from strings
        - Validate on attribute assignment
        - Allow ORM objects (from_attributes)
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True
    )


class FrozenSchema(BaseSchema):
    """Base for derived-only values that must not be mutated after construction."""
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True
    )
