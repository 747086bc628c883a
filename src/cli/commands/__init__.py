"""CLI commands."""

from src.cli.commands.check import check_date

__all__ = ["check_date"]
