"""Pure life-progress calculations.

No database, no I/O, only date arithmetic. Two tracks coexist:
capacity in days uses a fixed 365.25-day year, while elapsed counts for
the grids use calendar unit boundaries (see DisplayUnit.units_elapsed).
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from ..models.display_unit import DisplayUnit
from ..models.life_profile import LifeProfile
from ..models.progress import ProgressSummary, UnitProgress
from ..utils.calendar_math import DAYS_PER_WEEK, Instant, days_between

DAYS_PER_YEAR = 365.25
WEEKS_PER_YEAR = 52
DEFAULT_DECIMAL_PLACES = 0


def total_days(life_expectancy_years: int) -> int:
    """Lifespan capacity in days, truncated (80 years -> 29220)."""
    # 365.25 == 1461 / 4, kept in integers
    return life_expectancy_years * 1461 // 4


def days_lived(birth_date: Instant, reference: Instant) -> int:
    """Whole days since birth; 0 when ``reference`` precedes the birth date."""
    return max(0, days_between(birth_date, reference))


def days_remaining(life_expectancy_years: int, lived: int) -> int:
    return max(0, total_days(life_expectancy_years) - lived)


def percentage_lived(life_expectancy_years: int, lived: int) -> float:
    """Fraction of the lifespan lived, clamped to [0, 1]."""
    capacity = total_days(life_expectancy_years)
    if capacity <= 0:
        return 0.0
    return min(1.0, max(0.0, lived / capacity))


def format_percentage(percentage: float, decimal_places: int) -> str:
    """Render ``percentage * 100`` with exactly ``decimal_places`` digits.

    Rounds half up on the shortest decimal form of the value, so 0.125 at
    zero places gives "13" and 0.5 at three places gives "50.000".
    """
    value = Decimal(repr(percentage * 100))
    with localcontext() as ctx:
        # three integer digits at most, plus the requested places
        ctx.prec = max(ctx.prec, decimal_places + 4)
        ctx.Emin = min(ctx.Emin, -decimal_places)
        quantum = Decimal(1).scaleb(-decimal_places)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def current_age(birth_date: Instant, reference: Instant) -> float:
    """Age in fractional years on the fixed-length-year model."""
    return days_lived(birth_date, reference) / DAYS_PER_YEAR


def total_weeks(life_expectancy_years: int) -> int:
    return life_expectancy_years * WEEKS_PER_YEAR


def weeks_lived(birth_date: Instant, reference: Instant) -> int:
    return days_lived(birth_date, reference) // DAYS_PER_WEEK


def summarize(
    profile: LifeProfile, reference: Optional[datetime] = None
) -> ProgressSummary:
    """Compute the full progress summary for ``profile`` at ``reference``.

    Args:
        profile: Birth date, life expectancy and display precision.
        reference: Instant to measure at (defaults to now).

    Returns:
        A fresh ProgressSummary; nothing is cached between calls.
    """
    if reference is None:
        reference = datetime.now()

    years = profile.life_expectancy_years
    places = (
        profile.decimal_places
        if profile.decimal_places is not None
        else DEFAULT_DECIMAL_PLACES
    )

    lived = days_lived(profile.birth_date, reference)
    percentage = percentage_lived(years, lived)
    weeks = lived // DAYS_PER_WEEK

    return ProgressSummary(
        total_days=total_days(years),
        days_lived=lived,
        days_remaining=days_remaining(years, lived),
        percentage_lived=percentage,
        formatted_percentage_lived=format_percentage(percentage, places),
        total_weeks=total_weeks(years),
        weeks_lived=weeks,
        weeks_remaining=max(0, total_weeks(years) - weeks),
        current_age=lived / DAYS_PER_YEAR,
    )


def unit_progress(
    profile: LifeProfile,
    unit: DisplayUnit,
    reference: Optional[datetime] = None,
) -> UnitProgress:
    """Grid totals for one display unit, elapsed clamped to the grid size."""
    if reference is None:
        reference = datetime.now()

    total = unit.total_units(profile.life_expectancy_years)
    elapsed = min(total, unit.units_elapsed(profile.birth_date, reference))

    return UnitProgress(
        unit=unit,
        total_units=total,
        units_elapsed=elapsed,
        units_remaining=total - elapsed,
    )
