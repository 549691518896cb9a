"""Derived progress figures. Never persisted; recomputed per render pass."""

from dataclasses import dataclass

from .display_unit import DisplayUnit


@dataclass(frozen=True)
class ProgressSummary:
    """Day-level lived/remaining figures plus the week-derived stats."""

    total_days: int
    days_lived: int
    days_remaining: int
    percentage_lived: float
    formatted_percentage_lived: str
    total_weeks: int
    weeks_lived: int
    weeks_remaining: int
    current_age: float

    @property
    def whole_percent(self) -> int:
        """Truncated percentage as shown on the glanceable surfaces."""
        return int(self.percentage_lived * 100)


@dataclass(frozen=True)
class UnitProgress:
    """Grid-level totals for a single display unit."""

    unit: DisplayUnit
    total_units: int
    units_elapsed: int
    units_remaining: int

    @property
    def columns_per_row(self) -> int:
        return self.unit.columns_per_row
