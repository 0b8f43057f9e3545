"""Date coercion and day arithmetic shared by pricing and refunds.

Inputs may be ``date``, ``datetime`` or ISO-8601 strings. Timezone-aware
values are converted to the local timezone and made naive, so every
comparison happens on local wall-clock time.
"""

import datetime as dt
from typing import Union
from zoneinfo import ZoneInfo

from petfoster.config import get_settings
from petfoster.models.errors import InvalidDateError

DateInput = Union[dt.date, dt.datetime, str]

SECONDS_PER_HOUR = 3600


def to_local_datetime(value: DateInput, tz: ZoneInfo | None = None) -> dt.datetime:
    """Coerce a date input to a naive local datetime.

    Plain dates become local midnight.

    Args:
        value: Date, datetime or ISO-8601 string
        tz: Local timezone, defaults to the configured one

    Returns:
        Naive datetime in local time

    Raises:
        InvalidDateError: If the value cannot be parsed
    """
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time.min)
    elif isinstance(value, str):
        try:
            parsed = dt.datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid date: {value!r}", details={"value": value}
            ) from e
    else:
        raise InvalidDateError(
            f"Unsupported date type: {type(value).__name__}",
            details={"value": repr(value)},
        )

    if parsed.tzinfo is not None:
        local_tz = tz or get_settings().tzinfo
        parsed = parsed.astimezone(local_tz).replace(tzinfo=None)
    return parsed


def to_local_date(value: DateInput, tz: ZoneInfo | None = None) -> dt.date:
    """Coerce a date input to a local calendar date (time of day dropped)."""
    return to_local_datetime(value, tz).date()


def days_between(start: DateInput, end: DateInput, tz: ZoneInfo | None = None) -> int:
    """Count calendar days spanned by a range, both ends included.

    Order-independent; equal dates count as one day.

    Args:
        start: First day of the range
        end: Last day of the range
        tz: Local timezone for aware inputs

    Returns:
        Inclusive day count, always >= 1
    """
    start_day = to_local_date(start, tz)
    end_day = to_local_date(end, tz)
    return abs((end_day - start_day).days) + 1


def hours_until_start(
    start: DateInput, at: DateInput, tz: ZoneInfo | None = None
) -> float:
    """Fractional hours from ``at`` until ``start`` (negative once started)."""
    delta = to_local_datetime(start, tz) - to_local_datetime(at, tz)
    return delta.total_seconds() / SECONDS_PER_HOUR


def local_now(tz: ZoneInfo | None = None) -> dt.datetime:
    """Current naive local time; the default clock for services."""
    return dt.datetime.now(tz or get_settings().tzinfo).replace(tzinfo=None)
