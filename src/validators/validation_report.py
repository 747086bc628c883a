"""Validation report for collecting and formatting field errors."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional

from src.models.constraints import ValidationResult


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single field-level validation failure.

    Attributes:
        severity: The severity level of the issue
        field: The field name that has the issue
        message: Human-readable description of the issue
        value: The value that caused the issue
        code: Machine-readable reason (e.g. "out_of_window", "length")
        context: Optional context information (e.g., row)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    code: Optional[str] = None
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        """Return string representation of the issue.

        Returns:
            Formatted string with severity, field, and message
        """
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects the issues found while validating one or more records.

    A record is valid when the report holds no errors. Warnings never
    affect validity.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("effective_date", "Out of range", None, code="out_of_window")
        >>> report.is_valid()
        False
        >>> report.error_fields()
        ['effective_date']
    """

    def __init__(self) -> None:
        """Initialize an empty validation report."""
        self.issues: List[ValidationIssue] = []

    @property
    def error_count(self) -> int:
        """Number of error-level issues."""
        return len(self.get_errors())

    @property
    def warning_count(self) -> int:
        """Number of warning-level issues."""
        return len(self.get_warnings())

    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Returns:
            True if no errors are present, False otherwise
        """
        return self.error_count == 0

    def has_errors(self) -> bool:
        return self.error_count > 0

    def add_error(
        self,
        field: str,
        message: str,
        value: Any,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record a failed check on ``field``. Errors make the report invalid."""
        self._add(ValidationSeverity.ERROR, field, message, value, code, context)

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record a non-blocking note on ``field`` (e.g. a missing field)."""
        self._add(ValidationSeverity.WARNING, field, message, value, code, context)

    def _add(self, severity, field, message, value, code, context) -> None:
        self.issues.append(
            ValidationIssue(severity, field, message, value, code, context)
        )

    def _with_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    def get_errors(self) -> List[ValidationIssue]:
        """Get all error-level issues, in the order they were found."""
        return self._with_severity(ValidationSeverity.ERROR)

    def get_warnings(self) -> List[ValidationIssue]:
        return self._with_severity(ValidationSeverity.WARNING)

    def error_fields(self) -> List[str]:
        """Get the distinct names of fields with errors, in first-seen order."""
        seen: List[str] = []
        for issue in self.get_errors():
            if issue.field not in seen:
                seen.append(issue.field)
        return seen

    def errors_for(self, field: str) -> List[ValidationIssue]:
        """Get the errors reported for a single field."""
        return [issue for issue in self.get_errors() if issue.field == field]

    def result_for(self, field: str) -> ValidationResult:
        """Summarize a single field as a pass/fail result.

        Args:
            field: The field name to summarize

        Returns:
            ValidationResult, with the field's error messages joined by "; "
            when it failed
        """
        errors = self.errors_for(field)
        if not errors:
            return ValidationResult.passed()
        return ValidationResult.failed("; ".join(issue.message for issue in errors))

    def add_context(self, context: Dict[str, Any]) -> None:
        """Attach context (e.g. a row number) to every issue in the report."""
        for issue in self.issues:
            if issue.context is None:
                issue.context = context.copy()
            else:
                issue.context.update(context)

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one.

        Args:
            other: Another ValidationReport to merge
        """
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Get a summary with counts of errors and warnings."""
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the validation report for display.

        Returns:
            Formatted string with all issues grouped by severity
        """
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]

        errors = self.get_errors()
        if errors:
            lines.append("\nERRORS:")
            for issue in errors:
                lines.append(f"  - {issue}")

        warnings = self.get_warnings()
        if warnings:
            lines.append("\nWARNINGS:")
            for issue in warnings:
                lines.append(f"  - {issue}")

        return "\n".join(lines)
