"""Record validator orchestrator.

This module provides the RecordValidator class that walks a rule table,
dispatches each constraint to its field validator and aggregates the
failures into a ValidationReport.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from src.config.settings import get_config
from src.models.constraints import ConstraintKind, FieldConstraint
from src.validators.clock import Clock
from src.validators.field_validators import FieldValidators
from src.validators.rules import RuleTable, build_rule_table
from src.validators.validation_report import ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)

_MISSING = object()

_BUILTIN_CHECKS = {
    ConstraintKind.IS_DATE: FieldValidators.validate_is_date,
    ConstraintKind.LENGTH: FieldValidators.validate_length,
    ConstraintKind.CONTAINS: FieldValidators.validate_contains,
    ConstraintKind.IS_INT: FieldValidators.validate_is_int,
    ConstraintKind.MIN: FieldValidators.validate_min,
    ConstraintKind.MAX: FieldValidators.validate_max,
    ConstraintKind.IS_EMAIL: FieldValidators.validate_email,
    ConstraintKind.IS_FQDN: FieldValidators.validate_fqdn,
}


class RecordValidationError(Exception):
    """Raised by ``validate_or_raise`` when a record has errors."""

    def __init__(self, report: ValidationReport):
        self.report = report
        super().__init__(report.format())

    @property
    def errors(self) -> List[ValidationIssue]:
        return self.report.get_errors()


class RecordValidator:
    """Validates records against a rule table.

    Every constraint of every field is evaluated; one failing constraint
    does not stop the others. Records may be plain objects (attribute
    access) or mappings.

    Example:
        >>> validator = RecordValidator({
        ...     "effective_date": [is_date(), between_months(-12, 12)],
        ... })
        >>> report = validator.validate(record)
        >>> if not report.is_valid():
        ...     print(report.format())
    """

    def __init__(
        self,
        rules: RuleTable,
        clock: Optional[Clock] = None,
        warn_on_missing_fields: bool = True,
    ) -> None:
        """Initialize the validator.

        Args:
            rules: Mapping of field name to constraints (bound or unbound)
            clock: Source of "now" for date windows (default: the clock
                selected by configuration)
            warn_on_missing_fields: Whether to add a warning when a record
                lacks a field named in the rule table

        Raises:
            ValueError: If the rule table is malformed
        """
        self.rules = build_rule_table(rules)
        self.clock = clock or get_config().get_clock()
        self.warn_on_missing_fields = warn_on_missing_fields

    def validate(self, record: Any) -> ValidationReport:
        """Validate a single record.

        Args:
            record: Object or mapping holding the fields named in the rules

        Returns:
            ValidationReport with any issues found
        """
        report = ValidationReport()

        for field_name, constraints in self.rules.items():
            value = self._read(record, field_name)
            if value is _MISSING:
                if self.warn_on_missing_fields:
                    report.add_warning(
                        field_name,
                        "Field is not present on record",
                        None,
                        code="missing_field",
                    )
                value = None

            for constraint in constraints:
                self._check(record, value, constraint, report)

        if report.has_errors():
            logger.debug(
                "Record %s failed validation: %s",
                type(record).__name__,
                report.summary(),
            )
        return report

    def field_errors(self, record: Any) -> List[ValidationIssue]:
        """Validate a record and return only its errors (empty list = valid)."""
        return self.validate(record).get_errors()

    def is_valid(self, record: Any) -> bool:
        return self.validate(record).is_valid()

    def validate_or_raise(self, record: Any) -> ValidationReport:
        """Validate a record, raising when it has errors.

        Returns:
            The report (warnings only) when the record is valid

        Raises:
            RecordValidationError: If the record has any errors
        """
        report = self.validate(record)
        if not report.is_valid():
            raise RecordValidationError(report)
        return report

    def validate_records(self, records: Iterable[Any]) -> ValidationReport:
        """Validate multiple records.

        Issues carry a ``row`` context entry numbered from 1.

        Args:
            records: Records to validate

        Returns:
            ValidationReport with all issues found across all records
        """
        combined_report = ValidationReport()

        for idx, record in enumerate(records, start=1):
            record_report = self.validate(record)
            record_report.add_context({"row": idx})
            combined_report.merge(record_report)

        logger.info("Validated records: %s", combined_report.summary())
        return combined_report

    def _check(
        self,
        record: Any,
        value: Any,
        constraint: FieldConstraint,
        report: ValidationReport,
    ) -> None:
        if constraint.kind is ConstraintKind.BETWEEN_MONTHS:
            FieldValidators.validate_month_window(
                value, constraint, report, self.clock
            )
        elif constraint.kind is ConstraintKind.BETWEEN_MONTHS_RELATED_AFTER:
            related_value = self._read(record, constraint.params["related_field"])
            if related_value is _MISSING:
                related_value = None
            FieldValidators.validate_related_window(
                value, related_value, constraint, report, self.clock
            )
        else:
            check = _BUILTIN_CHECKS.get(constraint.kind)
            if check is None:
                raise ValueError(f"Unsupported constraint kind: {constraint.kind}")
            check(value, constraint, report)

    @staticmethod
    def _read(record: Any, field_name: str) -> Any:
        if isinstance(record, Mapping):
            return record.get(field_name, _MISSING)
        return getattr(record, field_name, _MISSING)
