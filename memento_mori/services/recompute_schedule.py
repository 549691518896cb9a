"""Recompute cadence for glanceable surfaces.

The host scheduler asks when the pipeline should run again; the answer is
the start of the next calendar week. Nothing here schedules anything.
"""

from datetime import date, datetime, time, timedelta
from typing import Union

from ..core.typed_config import RecomputePolicy

MONDAY = 0


def next_recompute_instant(
    reference: Union[date, datetime], first_weekday: int = MONDAY
) -> datetime:
    """Return midnight at the start of the calendar week after ``reference``.

    Args:
        reference: The current instant. Aware datetimes keep their tzinfo.
        first_weekday: Day a week starts on (0=Monday, 6=Sunday).

    Returns:
        A datetime strictly later than ``reference``.
    """
    tzinfo = reference.tzinfo if isinstance(reference, datetime) else None
    day = reference.date() if isinstance(reference, datetime) else reference

    days_ahead = (first_weekday - day.weekday()) % 7 or 7
    return datetime.combine(day + timedelta(days=days_ahead), time.min, tzinfo=tzinfo)


def next_recompute_for_policy(
    reference: Union[date, datetime], policy: RecomputePolicy
) -> datetime:
    return next_recompute_instant(reference, first_weekday=policy.first_weekday)
