"""Display units: the granularity of a life grid's cells."""

from enum import Enum

from ..utils.calendar_math import (
    Instant,
    whole_months_between,
    whole_weeks_between,
    whole_years_between,
)


class DisplayUnit(str, Enum):
    """Week, month or year cells; each fixes how many cells make one row."""

    WEEK = "weeks"
    MONTH = "months"
    YEAR = "years"

    @property
    def columns_per_row(self) -> int:
        return _COLUMNS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def total_units(self, life_expectancy_years: int) -> int:
        """Number of cells a full lifespan occupies."""
        return _UNITS_PER_YEAR[self] * life_expectancy_years

    def units_elapsed(self, birth_date: Instant, reference: Instant) -> int:
        """Whole calendar units between birth and ``reference``, never negative."""
        if self is DisplayUnit.WEEK:
            elapsed = whole_weeks_between(birth_date, reference)
        elif self is DisplayUnit.MONTH:
            elapsed = whole_months_between(birth_date, reference)
        else:
            elapsed = whole_years_between(birth_date, reference)
        return max(0, elapsed)


# One year per row for weeks and months, one decade per row for years
_COLUMNS = {
    DisplayUnit.WEEK: 52,
    DisplayUnit.MONTH: 12,
    DisplayUnit.YEAR: 10,
}

_UNITS_PER_YEAR = {
    DisplayUnit.WEEK: 52,
    DisplayUnit.MONTH: 12,
    DisplayUnit.YEAR: 1,
}
