"""Constraint descriptors and validation results.

This module defines the data carried through the rule engine:
- ValidationWindow: month offsets relative to "now"
- RelatedDateConstraint: a window plus a related field and sanity horizon
- WindowVerdict: discriminated outcome of a date window evaluation
- ConstraintKind / FieldConstraint: tagged entries of a rule table
- ValidationResult: per-field pass/fail plus message
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, field_validator, model_validator

from src.models.base import BaseDataModel

# 100 years
DEFAULT_SANITY_HORIZON_MONTHS = 1200


class WindowVerdict(str, Enum):
    """Outcome of evaluating a date against a window constraint."""

    VALID = "valid"
    OUT_OF_WINDOW = "out_of_window"
    ORDERING_VIOLATION = "ordering_violation"
    SANITY_HORIZON_EXCEEDED = "sanity_horizon_exceeded"
    NOT_A_DATE = "not_a_date"

    @property
    def is_valid(self) -> bool:
        return self is WindowVerdict.VALID


class ValidationWindow(BaseDataModel):
    """Inclusive window of calendar-month offsets from the evaluation instant.

    Attributes:
        min_months: Lower offset in months (may be negative)
        max_months: Upper offset in months (may be negative)

    Example:
        >>> window = ValidationWindow(min_months=-12, max_months=12)
        >>> window.max_months
        12
    """

    min_months: int = Field(..., description="Lower bound offset in months")
    max_months: int = Field(..., description="Upper bound offset in months")

    @model_validator(mode="after")
    def validate_bounds(self) -> "ValidationWindow":
        """Validate that the window is not inverted.

        Raises:
            ValueError: If min_months is greater than max_months
        """
        if self.min_months > self.max_months:
            raise ValueError(
                f"min_months ({self.min_months}) cannot be greater than "
                f"max_months ({self.max_months})"
            )
        return self


class RelatedDateConstraint(ValidationWindow):
    """Window on a primary date plus an ordering rule for a related date.

    The related date must be on or after the primary date and on or before
    the sanity horizon (``now + sanity_horizon_months``).

    Attributes:
        related_field: Name of the field holding the related date
        sanity_horizon_months: Absolute future cutoff in months from now
    """

    related_field: str = Field(..., min_length=1, description="Related field name")
    sanity_horizon_months: int = Field(
        default=DEFAULT_SANITY_HORIZON_MONTHS,
        gt=0,
        description="Absolute future cutoff in months from now",
    )

    @field_validator("related_field")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("related_field cannot be empty or whitespace")
        return v.strip()


class ConstraintKind(str, Enum):
    """Kinds of constraints a rule table entry may carry."""

    BETWEEN_MONTHS = "between_months"
    BETWEEN_MONTHS_RELATED_AFTER = "between_months_related_after"
    IS_DATE = "is_date"
    LENGTH = "length"
    CONTAINS = "contains"
    IS_INT = "is_int"
    MIN = "min"
    MAX = "max"
    IS_EMAIL = "is_email"
    IS_FQDN = "is_fqdn"


class FieldConstraint(BaseDataModel):
    """A single rule table entry: one constraint attached to one field.

    Attributes:
        field_name: Name of the constrained field (empty until bound to a field)
        kind: Which check to run
        params: Parameters for the check (e.g. window bounds, length limits)
        message: Optional custom failure message overriding the default
    """

    field_name: str = Field(default="", description="Constrained field name")
    kind: ConstraintKind
    params: Dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None

    def for_field(self, field_name: str) -> "FieldConstraint":
        """Return a copy of this constraint bound to ``field_name``."""
        return self.model_copy(update={"field_name": field_name}, deep=True)

    def window(self) -> ValidationWindow:
        """Build the window descriptor for a month-window constraint.

        Raises:
            ValueError: If the constraint is not a date window constraint
        """
        if self.kind is ConstraintKind.BETWEEN_MONTHS:
            return ValidationWindow(**self.params)
        if self.kind is ConstraintKind.BETWEEN_MONTHS_RELATED_AFTER:
            return RelatedDateConstraint(**self.params)
        raise ValueError(f"Constraint {self.kind.value} has no date window")


class ValidationResult(BaseDataModel):
    """Per-field validation outcome.

    Attributes:
        valid: Whether the field passed
        message: Failure message, present only when invalid
    """

    valid: bool
    message: Optional[str] = None

    @model_validator(mode="after")
    def validate_message(self) -> "ValidationResult":
        if self.valid and self.message is not None:
            raise ValueError("A valid result cannot carry a message")
        if not self.valid and not self.message:
            raise ValueError("An invalid result must carry a message")
        return self

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failed(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)
