"""Base model for all constraint and result models.

This module provides a base Pydantic model with the common configuration
shared by window descriptors, rule table entries and validation results.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Immutability (frozen models), so constraints can be shared freely
    - Arbitrary types support for dates and datetimes

    Example:
        >>> class Window(BaseDataModel):
        ...     min_months: int
        ...     max_months: int
        >>> window = Window(min_months=-12, max_months=12)
        >>> window.model_dump()
        {'min_months': -12, 'max_months': 12}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like date, datetime
        arbitrary_types_allowed=True,
        # Use lax type checking so "12" is accepted for an int offset
        strict=False,
        # Reject unknown keys in constraint parameters
        extra="forbid",
        # Constraints are immutable after creation
        frozen=True,
    )
