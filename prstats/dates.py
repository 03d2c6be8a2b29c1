"""Parsing of relative periods ("1w", "3mo") and calendar dates.

Months and years are fixed-length approximations (a year is 365.25 days, a
month is a twelfth of that), not calendar arithmetic.
"""

import re
from datetime import UTC, date, datetime, time, timedelta

from prstats.errors import InvalidDateFormat, InvalidPeriodFormat

_DAY = timedelta(days=1)
_YEAR = timedelta(days=365.25)

UNITS = {
    "d": _DAY,
    "day": _DAY,
    "days": _DAY,
    "w": 7 * _DAY,
    "wk": 7 * _DAY,
    "week": 7 * _DAY,
    "weeks": 7 * _DAY,
    "mo": _YEAR / 12,
    "mon": _YEAR / 12,
    "month": _YEAR / 12,
    "months": _YEAR / 12,
    "y": _YEAR,
    "yr": _YEAR,
    "year": _YEAR,
    "years": _YEAR,
}

_PERIOD_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-z]+)\s*$", re.IGNORECASE)


def period_to_timedelta(period: str) -> timedelta:
    """Convert a period like "2d" or "3mo" to a timedelta.

    Raises:
        InvalidPeriodFormat: If the string does not parse, is zero, or is
            too large for a timedelta.
    """
    match = _PERIOD_RE.match(period or "")
    if not match:
        raise InvalidPeriodFormat(period)
    amount = float(match.group(1))
    unit = UNITS.get(match.group(2).lower())
    if unit is None or amount <= 0:
        raise InvalidPeriodFormat(period)
    try:
        return unit * amount
    except OverflowError:
        raise InvalidPeriodFormat(period) from None


def parse_period(period: str, now: datetime | None = None) -> datetime:
    """Return the instant ``period`` before ``now`` (default: current UTC time)."""
    delta = period_to_timedelta(period)
    try:
        return (now or datetime.now(UTC)) - delta
    except OverflowError:
        raise InvalidPeriodFormat(period) from None


def parse_date(value: str) -> datetime:
    """Parse YYYY-MM-DD into midnight UTC of that day.

    Raises:
        InvalidDateFormat: If value is not a valid calendar date.
    """
    try:
        day = date.fromisoformat((value or "").strip())
    except (ValueError, TypeError, AttributeError):
        raise InvalidDateFormat(value) from None
    return datetime.combine(day, time.min, tzinfo=UTC)


def search_day(dt: datetime) -> str:
    """Format an instant as the UTC calendar day used in search qualifiers."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).strftime("%Y-%m-%d")


def to_iso(dt: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a trailing Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
