"""Clock sources for date window evaluation.

Window bounds are computed relative to "now". The clock is passed in
explicitly so tests and callers can pin the evaluation instant.
"""

import datetime as dt
from typing import Callable

Clock = Callable[[], dt.datetime]


def system_clock() -> dt.datetime:
    """Return the current local time as a naive datetime."""
    return dt.datetime.now()


def utc_clock() -> dt.datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return dt.datetime.now(dt.timezone.utc)


def fixed_clock(instant: dt.datetime) -> Clock:
    """Create a clock that always returns ``instant``.

    Args:
        instant: The instant to report as "now". A plain date is promoted
            to midnight of that day.

    Returns:
        Zero-argument callable returning ``instant``

    Example:
        >>> clock = fixed_clock(dt.datetime(2024, 1, 31, 12, 0))
        >>> clock()
        datetime.datetime(2024, 1, 31, 12, 0)
    """
    if not isinstance(instant, dt.datetime):
        if not isinstance(instant, dt.date):
            raise TypeError(f"Expected date or datetime, got {type(instant).__name__}")
        instant = dt.datetime.combine(instant, dt.time())

    def _clock() -> dt.datetime:
        return instant

    return _clock
