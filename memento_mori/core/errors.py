"""
Error types and boundary validation.

The calculation and layout modules assume sanitized input. Anything coming
from a user or a caller (CLI, render pass) is checked here first, so
out-of-range values are rejected rather than silently clamped.
"""

import math
from datetime import datetime
from typing import Optional

from ..models.life_profile import MAX_DECIMAL_PLACES


class MementoMoriError(Exception):
    """Base class for errors raised by this package."""


class InvalidInputError(MementoMoriError, ValueError):
    """Input rejected at the boundary before reaching the core."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class UnknownSurfaceError(MementoMoriError, KeyError):
    """Requested render surface is not in the catalog."""

    def __init__(self, name: str, available: tuple) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown surface {name!r}; available: {', '.join(available)}")

    def __str__(self) -> str:
        return self.args[0]


def validate_life_expectancy(years: int) -> int:
    if years < 0:
        raise InvalidInputError("life_expectancy_years", years, "must be >= 0")
    return years


def validate_decimal_places(places: Optional[int]) -> Optional[int]:
    if places is not None and not 0 <= places <= MAX_DECIMAL_PLACES:
        raise InvalidInputError(
            "decimal_places", places, f"must be between 0 and {MAX_DECIMAL_PLACES}"
        )
    return places


def validate_container(width: float, height: float) -> None:
    for field, value in (("container_width", width), ("container_height", height)):
        if not math.isfinite(value):
            raise InvalidInputError(field, value, "must be a finite number")
        if value < 0:
            raise InvalidInputError(field, value, "must be >= 0")


def validate_birth_date(birth_date: datetime, now: datetime) -> datetime:
    if birth_date > now:
        raise InvalidInputError(
            "birth_date", birth_date.date().isoformat(), "must not be in the future"
        )
    return birth_date
