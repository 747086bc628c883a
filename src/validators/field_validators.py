"""Field-level validators.

This module provides one check per constraint kind. Each check reads the
field value, compares it against the constraint parameters and records
an error on the report when the value fails.
"""

import datetime as dt
import re
from decimal import Decimal
from typing import Any, Optional

from src.models.constraints import FieldConstraint, WindowVerdict
from src.validators.clock import Clock, system_clock
from src.validators.date_window import (
    evaluate_month_window,
    evaluate_related_window,
    is_date_like,
)
from src.validators.messages import render_builtin_message, render_window_message
from src.validators.validation_report import ValidationReport

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
FQDN_LABEL_PATTERN = re.compile(r"^(?!-)[a-zA-Z0-9-]{1,63}(?<!-)$")
FQDN_TLD_PATTERN = re.compile(r"^[a-zA-Z]{2,63}$")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


class FieldValidators:
    """Collection of field-level validation methods.

    All methods share the signature ``(value, constraint, report)``; the
    date window checks additionally take the clock.
    """

    @staticmethod
    def validate_month_window(
        value: Any,
        constraint: FieldConstraint,
        report: ValidationReport,
        clock: Clock = system_clock,
    ) -> WindowVerdict:
        """Validate that a date falls within its month window.

        Args:
            value: The date value to validate
            constraint: BETWEEN_MONTHS constraint
            report: ValidationReport to collect issues
            clock: Source of "now"

        Returns:
            The verdict of the window check
        """
        verdict = evaluate_month_window(value, constraint.window(), clock)
        if not verdict.is_valid:
            report.add_error(
                constraint.field_name,
                render_window_message(constraint, verdict),
                value,
                code=verdict.value,
            )
        return verdict

    @staticmethod
    def validate_related_window(
        value: Any,
        related_value: Any,
        constraint: FieldConstraint,
        report: ValidationReport,
        clock: Clock = system_clock,
    ) -> WindowVerdict:
        """Validate a date window plus the ordering of a related date.

        The error is reported on the constrained field, as the rule is
        attached to it, even when the related value is the one at fault.

        Args:
            value: The primary date value
            related_value: Value of the related field on the same record
            constraint: BETWEEN_MONTHS_RELATED_AFTER constraint
            report: ValidationReport to collect issues
            clock: Source of "now"

        Returns:
            The verdict of the related window check
        """
        window = constraint.window()
        verdict = evaluate_related_window(value, related_value, window, clock)
        if not verdict.is_valid:
            subject = constraint.field_name
            if verdict is WindowVerdict.NOT_A_DATE and is_date_like(value):
                subject = window.related_field
            report.add_error(
                constraint.field_name,
                render_window_message(constraint, verdict, subject=subject),
                value,
                code=verdict.value,
            )
        return verdict

    @staticmethod
    def validate_is_date(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        if not isinstance(value, dt.date):
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_length(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        """Validate that a string's length is within the configured range."""
        if not isinstance(value, str):
            FieldValidators._fail(value, constraint, report)
            return

        min_length = constraint.params["min_length"]
        max_length: Optional[int] = constraint.params.get("max_length")
        if len(value) < min_length or (
            max_length is not None and len(value) > max_length
        ):
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_contains(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        if not isinstance(value, str) or constraint.params["seed"] not in value:
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_is_int(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_min(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        if not _is_number(value) or value < constraint.params["minimum"]:
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_max(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        if not _is_number(value) or value > constraint.params["maximum"]:
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_email(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def validate_fqdn(
        value: Any, constraint: FieldConstraint, report: ValidationReport
    ) -> None:
        """Validate a fully qualified domain name.

        Requires at least two labels, each 1-63 characters of letters,
        digits and inner hyphens, and an alphabetic top-level domain.
        A single trailing dot is allowed.
        """
        if not isinstance(value, str) or not FieldValidators._is_fqdn(value):
            FieldValidators._fail(value, constraint, report)

    @staticmethod
    def _is_fqdn(value: str) -> bool:
        name = value[:-1] if value.endswith(".") else value
        if not name or len(name) > 253:
            return False

        labels = name.split(".")
        if len(labels) < 2:
            return False
        if not FQDN_TLD_PATTERN.match(labels[-1]):
            return False
        return all(FQDN_LABEL_PATTERN.match(label) for label in labels)

    @staticmethod
    def _fail(value: Any, constraint: FieldConstraint, report: ValidationReport) -> None:
        report.add_error(
            constraint.field_name,
            render_builtin_message(constraint),
            value,
            code=constraint.kind.value,
        )
