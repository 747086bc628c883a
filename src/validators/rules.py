"""Rule table construction.

A rule table maps field names to the constraints checked on that field::

    rules = build_rule_table({
        "effective_date": [is_date(), between_months(-12, 12)],
        "expiration_date": [is_date()],
    })

Factories return unbound constraints; ``build_rule_table`` binds each one
to its field name and rejects malformed tables.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Union

from src.config.settings import get_config
from src.models.constraints import (
    ConstraintKind,
    FieldConstraint,
    RelatedDateConstraint,
    ValidationWindow,
)

RuleTable = Dict[str, List[FieldConstraint]]

Number = Union[int, float]


def between_months(
    min_months: int, max_months: int, message: Optional[str] = None
) -> FieldConstraint:
    """Date must fall within ``[now + min_months, now + max_months]``.

    Raises:
        pydantic.ValidationError: If min_months > max_months
    """
    window = ValidationWindow(min_months=min_months, max_months=max_months)
    return FieldConstraint(
        kind=ConstraintKind.BETWEEN_MONTHS,
        params=window.model_dump(),
        message=message,
    )


def between_months_and_related_after(
    min_months: int,
    max_months: int,
    related_field: str,
    sanity_horizon_months: Optional[int] = None,
    message: Optional[str] = None,
) -> FieldConstraint:
    """Date must be inside its month window and ``related_field`` must follow it.

    Args:
        min_months: Lower window offset in months
        max_months: Upper window offset in months
        related_field: Name of the field that must not precede this one
        sanity_horizon_months: Absolute future cutoff for the related field
            (default: the configured SANITY_HORIZON_MONTHS)
        message: Optional custom failure message

    Raises:
        pydantic.ValidationError: If the window or horizon is invalid
    """
    if sanity_horizon_months is None:
        sanity_horizon_months = get_config().sanity_horizon_months

    constraint = RelatedDateConstraint(
        min_months=min_months,
        max_months=max_months,
        related_field=related_field,
        sanity_horizon_months=sanity_horizon_months,
    )
    return FieldConstraint(
        kind=ConstraintKind.BETWEEN_MONTHS_RELATED_AFTER,
        params=constraint.model_dump(),
        message=message,
    )


def is_date(message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(kind=ConstraintKind.IS_DATE, message=message)


def length(
    min_length: int, max_length: Optional[int] = None, message: Optional[str] = None
) -> FieldConstraint:
    """String length must be within ``[min_length, max_length]`` (inclusive)."""
    if min_length < 0:
        raise ValueError(f"min_length must be non-negative, got {min_length}")
    if max_length is not None and max_length < min_length:
        raise ValueError(
            f"max_length ({max_length}) cannot be less than min_length ({min_length})"
        )
    return FieldConstraint(
        kind=ConstraintKind.LENGTH,
        params={"min_length": min_length, "max_length": max_length},
        message=message,
    )


def contains(seed: str, message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(
        kind=ConstraintKind.CONTAINS, params={"seed": seed}, message=message
    )


def is_int(message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(kind=ConstraintKind.IS_INT, message=message)


def min_value(minimum: Number, message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(
        kind=ConstraintKind.MIN, params={"minimum": minimum}, message=message
    )


def max_value(maximum: Number, message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(
        kind=ConstraintKind.MAX, params={"maximum": maximum}, message=message
    )


def is_email(message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(kind=ConstraintKind.IS_EMAIL, message=message)


def is_fqdn(message: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(kind=ConstraintKind.IS_FQDN, message=message)


def build_rule_table(
    rules: Mapping[str, Sequence[FieldConstraint]],
) -> RuleTable:
    """Bind constraints to their field names and check the table.

    Args:
        rules: Mapping of field name to the constraints for that field

    Returns:
        RuleTable with every constraint's ``field_name`` set

    Raises:
        ValueError: If a field name is empty, an entry is not a
            FieldConstraint, or a constraint is already bound to another field
    """
    table: RuleTable = {}
    for field_name, constraints in rules.items():
        if not field_name or not field_name.strip():
            raise ValueError("Rule table field names cannot be empty")

        bound: List[FieldConstraint] = []
        for constraint in constraints:
            if not isinstance(constraint, FieldConstraint):
                raise ValueError(
                    f"Rule for '{field_name}' must be a FieldConstraint, "
                    f"got {type(constraint).__name__}"
                )
            if constraint.field_name and constraint.field_name != field_name:
                raise ValueError(
                    f"Constraint bound to '{constraint.field_name}' "
                    f"listed under '{field_name}'"
                )
            bound.append(constraint.for_field(field_name))
        table[field_name] = bound

    return table
