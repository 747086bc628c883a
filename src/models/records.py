"""Example records and their rule tables.

These are plain data classes; their constraints live in rule tables
rather than on the classes themselves.

Example:
    >>> validator = RecordValidator(dates_rules())
    >>> validator.field_errors(Dates(effective_date=today, expiration_date=today))
    []
"""

import datetime as dt
from dataclasses import dataclass
from typing import Optional

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

YEAR_WINDOW_MESSAGE = "Date must be within a year of today"


@dataclass
class Dates:
    """Two independent dates, each within a year of today."""

    effective_date: Optional[dt.date]
    expiration_date: Optional[dt.date]


@dataclass
class SmartDates:
    """An effective date within a year of today and an expiration after it."""

    effective_date: Optional[dt.date]
    expiration_date: Optional[dt.date]


@dataclass
class Post:
    """A post checked with built-in constraints only."""

    title: str
    text: str
    rating: int
    email: str
    site: str


def dates_rules() -> RuleTable:
    return build_rule_table(
        {
            "effective_date": [
                is_date(),
                between_months(-12, 12, message=YEAR_WINDOW_MESSAGE),
            ],
            "expiration_date": [
                is_date(),
                between_months(-12, 12, message=YEAR_WINDOW_MESSAGE),
            ],
        }
    )


def smart_dates_rules(sanity_horizon_months: Optional[int] = None) -> RuleTable:
    """Rules for SmartDates.

    Failures keep their default per-reason messages so an ordering problem
    can be told apart from an out-of-window date.
    """
    return build_rule_table(
        {
            "effective_date": [
                is_date(),
                between_months_and_related_after(
                    -12,
                    12,
                    "expiration_date",
                    sanity_horizon_months=sanity_horizon_months,
                ),
            ],
            "expiration_date": [is_date()],
        }
    )


def post_rules() -> RuleTable:
    return build_rule_table(
        {
            "title": [length(10, 20)],
            "text": [contains("hello")],
            "rating": [is_int(), min_value(0), max_value(10)],
            "email": [is_email()],
            "site": [is_fqdn()],
        }
    )
