"""Rule engine for rolling date windows and field-level constraints."""

from src.validators.clock import Clock, fixed_clock, system_clock, utc_clock
from src.validators.date_window import (
    DateWindowValidator,
    add_months,
    shift_bound,
    evaluate_month_window,
    evaluate_related_window,
    within_month_window,
    within_related_window,
)
from src.validators.field_validators import FieldValidators
from src.validators.rules import (
    RuleTable,
    between_months,
    between_months_and_related_after,
    build_rule_table,
    contains,
    is_date,
    is_email,
    is_fqdn,
    is_int,
    length,
    max_value,
    min_value,
)
from src.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)
from src.validators.validator import RecordValidationError, RecordValidator

__all__ = [
    "Clock",
    "fixed_clock",
    "system_clock",
    "utc_clock",
    "DateWindowValidator",
    "add_months",
    "shift_bound",
    "evaluate_month_window",
    "evaluate_related_window",
    "within_month_window",
    "within_related_window",
    "FieldValidators",
    "RuleTable",
    "between_months",
    "between_months_and_related_after",
    "build_rule_table",
    "contains",
    "is_date",
    "is_email",
    "is_fqdn",
    "is_int",
    "length",
    "max_value",
    "min_value",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "RecordValidationError",
    "RecordValidator",
]
