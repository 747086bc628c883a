"""CLI utility functions."""

from src.cli.utils.formatters import (
    format_error,
    format_info,
    format_issue,
    format_success,
    format_warning,
)

__all__ = [
    "format_error",
    "format_info",
    "format_issue",
    "format_success",
    "format_warning",
]
