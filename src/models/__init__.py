"""Data models for the rule engine.

This package contains Pydantic models for:
- BaseDataModel: Base class with common configuration
- ValidationWindow / RelatedDateConstraint: date window descriptors
- FieldConstraint / ConstraintKind: rule table entries
- ValidationResult / WindowVerdict: evaluation outcomes

Example records with their rule tables live in ``src.models.records``.
"""

from src.models.base import BaseDataModel
from src.models.constraints import (
    DEFAULT_SANITY_HORIZON_MONTHS,
    ConstraintKind,
    FieldConstraint,
    RelatedDateConstraint,
    ValidationResult,
    ValidationWindow,
    WindowVerdict,
)

__all__ = [
    "BaseDataModel",
    "DEFAULT_SANITY_HORIZON_MONTHS",
    "ConstraintKind",
    "FieldConstraint",
    "RelatedDateConstraint",
    "ValidationResult",
    "ValidationWindow",
    "WindowVerdict",
]
