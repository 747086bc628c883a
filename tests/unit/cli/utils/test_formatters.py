"""Unit tests for CLI output formatters."""

import click

from src.cli.utils.formatters import (
    format_error,
    format_info,
    format_issue,
    format_success,
    format_warning,
)
from src.validators.validation_report import ValidationIssue, ValidationSeverity


class TestFormatters:
    """Test suite for CLI output formatters."""

    def test_format_success_contains_message(self):
        """Test that success formatter includes the message."""
        result = format_success("Operation completed")
        assert "Operation completed" in result
        assert "✓" in result

    def test_format_error_contains_message(self):
        """Test that error formatter includes the message."""
        result = format_error("Something went wrong")
        assert "Something went wrong" in result
        assert "✗" in result

    def test_format_warning_contains_message(self):
        """Test that warning formatter includes the message."""
        result = format_warning("This is a warning")
        assert "This is a warning" in result
        assert "⚠" in result

    def test_format_info_contains_message(self):
        """Test that info formatter includes the message."""
        result = format_info("Information message")
        assert "Information message" in result
        assert "ℹ" in result


class TestFormatIssue:
    """Test suite for validation issue formatting."""

    def test_error_issue_includes_code(self):
        """Test that an error issue shows field, message and code."""
        issue = ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field="effective_date",
            message="Date must be within a year of today",
            value=None,
            code="out_of_window",
        )

        result = click.unstyle(format_issue(issue))

        assert result == (
            "✗ effective_date: Date must be within a year of today [out_of_window]"
        )

    def test_warning_issue_without_code(self):
        """Test that a warning issue uses the warning style."""
        issue = ValidationIssue(
            severity=ValidationSeverity.WARNING,
            field="site",
            message="Field is not present on record",
            value=None,
        )

        result = click.unstyle(format_issue(issue))

        assert result == "⚠ site: Field is not present on record"
