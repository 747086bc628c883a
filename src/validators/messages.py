"""Message rendering for constraint failures.

Verdicts are computed without any text; this module turns a failed
constraint into the human-readable message stored on a validation issue.
"""

from typing import Optional

from src.models.constraints import ConstraintKind, FieldConstraint, WindowVerdict

WINDOW_MESSAGES = {
    WindowVerdict.OUT_OF_WINDOW: (
        "{field} must be within {min_months} and {max_months} months from today"
    ),
    WindowVerdict.ORDERING_VIOLATION: "{related_field} must not be before {field}",
    WindowVerdict.SANITY_HORIZON_EXCEEDED: (
        "{related_field} must be within {sanity_horizon_months} months from today"
    ),
}

BUILTIN_MESSAGES = {
    ConstraintKind.IS_DATE: "{field} must be a date",
    ConstraintKind.LENGTH: (
        "{field} must be between {min_length} and {max_length} characters long"
    ),
    ConstraintKind.CONTAINS: "{field} must contain '{seed}'",
    ConstraintKind.IS_INT: "{field} must be an integer",
    ConstraintKind.MIN: "{field} must not be less than {minimum}",
    ConstraintKind.MAX: "{field} must not be greater than {maximum}",
    ConstraintKind.IS_EMAIL: "{field} must be an email",
    ConstraintKind.IS_FQDN: "{field} must be a valid domain name",
}


def render_window_message(
    constraint: FieldConstraint,
    verdict: WindowVerdict,
    subject: Optional[str] = None,
) -> Optional[str]:
    """Render the message for a date window verdict.

    Args:
        constraint: The window constraint that was evaluated
        verdict: Outcome of the evaluation
        subject: Field to name in a NOT_A_DATE message (default: the
            constrained field)

    Returns:
        None for a valid verdict, otherwise the custom message of the
        constraint or the default for the verdict
    """
    if verdict.is_valid:
        return None
    if constraint.message:
        return constraint.message

    if verdict is WindowVerdict.NOT_A_DATE:
        return BUILTIN_MESSAGES[ConstraintKind.IS_DATE].format(
            field=subject or constraint.field_name
        )
    return WINDOW_MESSAGES[verdict].format(
        field=constraint.field_name, **constraint.params
    )


def render_builtin_message(constraint: FieldConstraint) -> str:
    """Render the failure message for a built-in constraint."""
    if constraint.message:
        return constraint.message
    template = BUILTIN_MESSAGES.get(constraint.kind)
    if (
        constraint.kind is ConstraintKind.LENGTH
        and constraint.params.get("max_length") is None
    ):
        template = "{field} must be at least {min_length} characters long"
    if template is None:
        raise ValueError(f"No message template for constraint {constraint.kind.value}")
    return template.format(field=constraint.field_name, **constraint.params)
