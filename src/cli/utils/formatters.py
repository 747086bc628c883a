"""Output formatting utilities for CLI."""

import click

from src.validators.validation_report import ValidationIssue, ValidationSeverity


def format_success(message: str) -> str:
    """Format a success message with green color.

    Args:
        message: The success message to format

    Returns:
        Formatted success message with color
    """
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with color
    """
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_issue(issue: ValidationIssue) -> str:
    """Format a validation issue, colored by severity.

    Args:
        issue: The issue to format

    Returns:
        One-line description with the failure code when known
    """
    code_str = f" [{issue.code}]" if issue.code else ""
    text = f"{issue.field}: {issue.message}{code_str}"
    if issue.severity == ValidationSeverity.ERROR:
        return format_error(text)
    return format_warning(text)
