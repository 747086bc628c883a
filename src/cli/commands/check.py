"""Check a single date against a month window."""

import datetime as dt
from typing import Optional

import click
from pydantic import ValidationError

from src.cli.utils.formatters import format_info, format_issue, format_success
from src.validators.clock import fixed_clock
from src.validators.rules import between_months, between_months_and_related_after
from src.validators.validator import RecordValidator


def parse_date_like(ctx, param, value: Optional[str]):
    """Parse an ISO date (``2025-01-31``) or datetime (``2025-01-31T09:30``).

    Plain dates stay dates so they are compared by calendar day.
    """
    if value is None:
        return None
    try:
        if len(value) == 10:
            return dt.date.fromisoformat(value)
        return dt.datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(
            f"'{value}' is not an ISO date or datetime (YYYY-MM-DD[THH:MM[:SS]])"
        )


@click.command(name="check-date")
@click.argument("date", callback=parse_date_like)
@click.option(
    "--min", "min_months", type=int, required=True, help="Lower offset in months"
)
@click.option(
    "--max", "max_months", type=int, required=True, help="Upper offset in months"
)
@click.option(
    "--related",
    type=str,
    default=None,
    callback=parse_date_like,
    help="Related date that must not precede DATE",
)
@click.option(
    "--horizon",
    type=click.IntRange(min=1),
    default=None,
    help=(
        "Sanity horizon for the related date in months "
        "(requires --related; default: configured)"
    ),
)
@click.option(
    "--now",
    type=str,
    default=None,
    callback=parse_date_like,
    help="Evaluate as if this were the current date/time",
)
def check_date(
    date,
    min_months: int,
    max_months: int,
    related,
    horizon: Optional[int],
    now,
):
    """Check that DATE is within MIN and MAX months from now.

    With --related, also check that the related date is on or after DATE
    and within the sanity horizon.

    Returns non-zero exit code if the check fails.

    Example:
        date-window check-date 2025-03-01 --min -12 --max 12
        date-window check-date 2025-03-01 --min -12 --max 12 --related 2025-09-01
        date-window check-date 2025-03-01 --min 0 --max 1 --now 2025-01-31
    """
    if horizon is not None and related is None:
        raise click.UsageError("--horizon requires --related")

    try:
        if related is None:
            constraint = between_months(min_months, max_months)
        else:
            constraint = between_months_and_related_after(
                min_months,
                max_months,
                "related_date",
                sanity_horizon_months=horizon,
            )
    except ValidationError as e:
        raise click.BadParameter(
            f"invalid window [{min_months}, {max_months}]: {e.errors()[0]['msg']}"
        )

    clock = fixed_clock(now) if now is not None else None
    validator = RecordValidator(
        {"date": [constraint]}, clock=clock, warn_on_missing_fields=False
    )

    click.echo(format_info(f"Evaluated at: {validator.clock().isoformat()}"))
    report = validator.validate({"date": date, "related_date": related})

    if report.is_valid():
        click.echo(format_success(f"{date.isoformat()} is valid"))
        return

    for issue in report.get_errors():
        click.echo(format_issue(issue))
    raise click.Abort()
