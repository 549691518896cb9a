"""Life profile value object: birth date, life expectancy, display precision.

Immutable; a settings edit produces a new profile. The persisted record uses
camelCase keys: ``{birthDate, lifeExpectancyYears, decimalPlaces?}``.
"""

from datetime import date, datetime, time
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.calendar_math import add_months

DEFAULT_LIFE_EXPECTANCY_YEARS = 80
DEFAULT_AGE_YEARS = 30
# a float percentage holds about 15 significant digits
MAX_DECIMAL_PLACES = 15


class LifeProfile(BaseModel):
    """A person's birth date and assumed life expectancy."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    birth_date: datetime = Field(alias="birthDate")
    life_expectancy_years: int = Field(alias="lifeExpectancyYears")
    decimal_places: Optional[int] = Field(default=None, alias="decimalPlaces")

    @field_validator("birth_date", mode="before")
    @classmethod
    def date_to_midnight(cls, v: Any) -> Any:
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min)
        return v

    @field_validator("life_expectancy_years")
    @classmethod
    def expectancy_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("life_expectancy_years must be >= 0")
        return v

    @field_validator("decimal_places")
    @classmethod
    def decimal_places_in_range(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not 0 <= v <= MAX_DECIMAL_PLACES:
            raise ValueError(f"decimal_places must be 0-{MAX_DECIMAL_PLACES}")
        return v

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the persisted record shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def with_changes(self, **changes: Any) -> "LifeProfile":
        """Return a new profile with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return LifeProfile(**data)


def default_profile(
    now: Optional[datetime] = None,
    life_expectancy_years: int = DEFAULT_LIFE_EXPECTANCY_YEARS,
    age_years: int = DEFAULT_AGE_YEARS,
) -> LifeProfile:
    """Profile used when nothing valid is stored: born 30 years ago, 80 expected."""
    if now is None:
        now = datetime.now()
    return LifeProfile(
        birth_date=add_months(now, -age_years * 12),
        life_expectancy_years=life_expectancy_years,
    )
