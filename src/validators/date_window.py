"""Rolling month-window checks for date fields.

This module implements the two date-relationship rules of the engine:

- month window: a date must fall within ``[now + min_months, now + max_months]``
- related window: the primary date is inside its month window, and a related
  date lies on or after it and on or before ``now + sanity_horizon_months``

Month arithmetic is calendar based (``dateutil.relativedelta``). When the
target month is shorter than the source day, the day is clamped to the last
day of the target month, so Jan 31 + 1 month is Feb 28 (Feb 29 in leap years).

All functions are pure apart from reading the injected clock once per call.
They never raise for bad input; non-date values yield ``NOT_A_DATE``.
"""

import datetime as dt
import logging
from typing import Any, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from src.models.constraints import (
    RelatedDateConstraint,
    ValidationWindow,
    WindowVerdict,
)
from src.validators.clock import Clock, system_clock

logger = logging.getLogger(__name__)

DateLike = Union[dt.date, dt.datetime]


def add_months(instant: DateLike, months: int) -> DateLike:
    """Shift a date or datetime by a number of calendar months.

    Args:
        instant: Starting point
        months: Offset in months (may be negative)

    Returns:
        Shifted value of the same type, day clamped to the target month end

    Example:
        >>> add_months(dt.date(2024, 1, 31), 1)
        datetime.date(2024, 2, 29)
        >>> add_months(dt.date(2023, 3, 31), -1)
        datetime.date(2023, 2, 28)
    """
    return instant + relativedelta(months=months)


def is_date_like(value: Any) -> bool:
    """Check whether a value can be compared against window bounds."""
    return isinstance(value, dt.date)


def _align(reference: dt.datetime, candidate: DateLike) -> DateLike:
    """Convert a bound computed from "now" to the candidate's granularity.

    Plain dates compare by calendar day. Datetimes compare as instants,
    with the bound converted to match the candidate's timezone awareness.
    """
    if not isinstance(candidate, dt.datetime):
        return reference.date()

    candidate_aware = candidate.tzinfo is not None
    reference_aware = reference.tzinfo is not None
    try:
        if candidate_aware and not reference_aware:
            # Naive clocks report local time
            return reference.astimezone()
        if reference_aware and not candidate_aware:
            return reference.astimezone().replace(tzinfo=None)
    except (OverflowError, ValueError):
        # Clamped bounds at the ends of the range cannot be shifted
        return reference.replace(tzinfo=candidate.tzinfo)
    return reference


def shift_bound(now: dt.datetime, months: int) -> dt.datetime:
    """Shift "now" by a number of months, clamped to the datetime range.

    Offsets that leave years 1 to 9999 give ``datetime.min`` (negative
    offsets) or ``datetime.max`` (positive offsets), keeping the tzinfo of
    ``now``.

    Example:
        >>> shift_bound(dt.datetime(2024, 6, 15), 200000)
        datetime.datetime(9999, 12, 31, 23, 59, 59, 999999)
    """
    try:
        return add_months(now, months)
    except (OverflowError, ValueError):
        limit = dt.datetime.max if months > 0 else dt.datetime.min
        return limit.replace(tzinfo=now.tzinfo)


def month_window_bounds(
    window: ValidationWindow, now: dt.datetime
) -> Tuple[dt.datetime, dt.datetime]:
    """Compute the inclusive ``(lower, upper)`` bounds of a window.

    Args:
        window: Month offsets relative to ``now``
        now: Evaluation instant

    Returns:
        Tuple of lower and upper bound datetimes
    """
    return (
        shift_bound(now, window.min_months),
        shift_bound(now, window.max_months),
    )


def _check_window(
    candidate: Any, window: ValidationWindow, now: dt.datetime
) -> WindowVerdict:
    if not is_date_like(candidate):
        return WindowVerdict.NOT_A_DATE

    lower, upper = month_window_bounds(window, now)
    if _align(lower, candidate) <= candidate <= _align(upper, candidate):
        return WindowVerdict.VALID
    return WindowVerdict.OUT_OF_WINDOW


def _check_related(
    primary: Any,
    related: Any,
    constraint: RelatedDateConstraint,
    now: dt.datetime,
) -> WindowVerdict:
    verdict = _check_window(primary, constraint, now)
    if not verdict.is_valid:
        return verdict

    if not is_date_like(related):
        return WindowVerdict.NOT_A_DATE

    try:
        if related < primary:
            return WindowVerdict.ORDERING_VIOLATION
    except TypeError:
        # date vs datetime or naive vs aware: compare as calendar days
        if _as_day(related) < _as_day(primary):
            return WindowVerdict.ORDERING_VIOLATION

    horizon = shift_bound(now, constraint.sanity_horizon_months)
    if related > _align(horizon, related):
        return WindowVerdict.SANITY_HORIZON_EXCEEDED

    return WindowVerdict.VALID


def _as_day(value: DateLike) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def evaluate_month_window(
    candidate: Any,
    window: ValidationWindow,
    clock: Clock = system_clock,
) -> WindowVerdict:
    """Evaluate a candidate date against a month window.

    Args:
        candidate: Date or datetime to check
        window: Inclusive month offsets from now
        clock: Source of "now"

    Returns:
        VALID, OUT_OF_WINDOW, or NOT_A_DATE
    """
    verdict = _check_window(candidate, window, clock())
    if not verdict.is_valid:
        logger.debug(
            "Month window check failed: %s (window=[%d, %d], value=%r)",
            verdict.value,
            window.min_months,
            window.max_months,
            candidate,
        )
    return verdict


def within_month_window(
    candidate: Any,
    window: ValidationWindow,
    clock: Clock = system_clock,
) -> bool:
    """Return True iff ``now + min <= candidate <= now + max``."""
    return evaluate_month_window(candidate, window, clock).is_valid


def evaluate_related_window(
    primary: Any,
    related: Any,
    constraint: RelatedDateConstraint,
    clock: Clock = system_clock,
) -> WindowVerdict:
    """Evaluate a primary date and its related date.

    The primary date is checked against the month window first; when that
    fails the related date is not looked at. Otherwise the related date must
    not precede the primary date nor exceed the sanity horizon.

    Args:
        primary: Date constrained by the month window
        related: Date that must follow the primary date
        constraint: Window, related field name and sanity horizon
        clock: Source of "now", read once for all bounds

    Returns:
        VALID, OUT_OF_WINDOW, ORDERING_VIOLATION, SANITY_HORIZON_EXCEEDED,
        or NOT_A_DATE
    """
    verdict = _check_related(primary, related, constraint, clock())
    if not verdict.is_valid:
        logger.debug(
            "Related window check failed: %s (related_field=%s, horizon=%d)",
            verdict.value,
            constraint.related_field,
            constraint.sanity_horizon_months,
        )
    return verdict


def within_related_window(
    primary: Any,
    related: Any,
    constraint: RelatedDateConstraint,
    clock: Clock = system_clock,
) -> bool:
    """Return True iff the primary and related dates satisfy ``constraint``."""
    return evaluate_related_window(primary, related, constraint, clock).is_valid


class DateWindowValidator:
    """Date window checks bound to a single clock.

    Example:
        >>> validator = DateWindowValidator(fixed_clock(dt.datetime(2024, 6, 15)))
        >>> window = ValidationWindow(min_months=-12, max_months=12)
        >>> validator.within_month_window(dt.date(2025, 3, 15), window)
        True
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize the validator.

        Args:
            clock: Source of "now" (default: system clock)
        """
        self.clock: Clock = clock or system_clock

    def now(self) -> dt.datetime:
        return self.clock()

    def evaluate_month_window(
        self, candidate: Any, window: ValidationWindow
    ) -> WindowVerdict:
        return evaluate_month_window(candidate, window, self.clock)

    def within_month_window(self, candidate: Any, window: ValidationWindow) -> bool:
        return within_month_window(candidate, window, self.clock)

    def evaluate_related_window(
        self, primary: Any, related: Any, constraint: RelatedDateConstraint
    ) -> WindowVerdict:
        return evaluate_related_window(primary, related, constraint, self.clock)

    def within_related_window(
        self, primary: Any, related: Any, constraint: RelatedDateConstraint
    ) -> bool:
        return within_related_window(primary, related, constraint, self.clock)
