"""Calendar arithmetic shared by the progress calculator and display units.

Elapsed counts here are signed; callers clamp to zero where a negative
count is meaningless. Mixed ``date``/``datetime`` inputs are normalised to
``datetime`` so both calling conventions compare cleanly.
"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Tuple, Union

Instant = Union[date, datetime]

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def normalize_pair(start: Instant, end: Instant) -> Tuple[Instant, Instant]:
    """Coerce two instants to comparable types.

    A plain ``date`` next to a ``datetime`` becomes midnight of that day.
    A naive ``datetime`` next to an aware one takes the aware one's tzinfo.
    """
    start_is_dt = isinstance(start, datetime)
    end_is_dt = isinstance(end, datetime)

    if start_is_dt and not end_is_dt:
        end = datetime.combine(end, time.min, tzinfo=start.tzinfo)
    elif end_is_dt and not start_is_dt:
        start = datetime.combine(start, time.min, tzinfo=end.tzinfo)

    if isinstance(start, datetime) and isinstance(end, datetime):
        if start.tzinfo is None and end.tzinfo is not None:
            start = start.replace(tzinfo=end.tzinfo)
        elif end.tzinfo is None and start.tzinfo is not None:
            end = end.replace(tzinfo=start.tzinfo)

    return start, end


def add_months(value: Instant, months: int) -> Instant:
    """Shift ``value`` by whole calendar months, clamping the day of month.

    Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).
    """
    year, month_index = divmod(value.month - 1 + months, MONTHS_PER_YEAR)
    year += value.year
    month = month_index + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def days_between(start: Instant, end: Instant) -> int:
    """Whole days from ``start`` to ``end`` (floored, may be negative)."""
    start, end = normalize_pair(start, end)
    delta: timedelta = end - start
    return delta.days


def whole_weeks_between(start: Instant, end: Instant) -> int:
    return days_between(start, end) // DAYS_PER_WEEK


def whole_months_between(start: Instant, end: Instant) -> int:
    """Number of complete calendar months from ``start`` to ``end``."""
    start, end = normalize_pair(start, end)
    if end < start:
        return -whole_months_between(end, start)

    months = (end.year - start.year) * MONTHS_PER_YEAR + (end.month - start.month)
    if months > 0 and add_months(start, months) > end:
        months -= 1
    return months


def whole_years_between(start: Instant, end: Instant) -> int:
    """Number of complete calendar years from ``start`` to ``end``."""
    start, end = normalize_pair(start, end)
    if end < start:
        return -whole_years_between(end, start)

    years = end.year - start.year
    if years > 0 and add_months(start, years * MONTHS_PER_YEAR) > end:
        years -= 1
    return years
