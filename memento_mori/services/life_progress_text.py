"""Stat labels for the grid surfaces and lock-screen accessories.

Pure formatting over a ProgressSummary / UnitProgress, no I/O.
"""

from typing import List, NamedTuple

from ..models.progress import ProgressSummary, UnitProgress

TITLE = "MEMENTO MORI"
WEEKS_SUBTITLE = "Your life in weeks"


class Stat(NamedTuple):
    value: str
    label: str


def format_progress_caption(summary: ProgressSummary) -> str:
    return f"{summary.whole_percent}% of your life"


def interactive_stats(summary: ProgressSummary) -> List[Stat]:
    """Stats card above the interactive grid."""
    return [
        Stat(str(int(summary.current_age)), "Years Old"),
        Stat(str(summary.weeks_lived), "Weeks Lived"),
        Stat(str(summary.weeks_remaining), "Weeks Left"),
    ]


def small_stats(years: UnitProgress, life_expectancy_years: int) -> List[Stat]:
    return [Stat(str(years.units_elapsed), f"of {life_expectancy_years} years")]


def medium_stats(summary: ProgressSummary) -> List[Stat]:
    return [
        Stat(f"{summary.whole_percent}%", "lived"),
        Stat(str(summary.weeks_lived), "weeks lived"),
        Stat(str(summary.weeks_remaining), "weeks left"),
    ]


def large_header(summary: ProgressSummary) -> Stat:
    return Stat(
        f"{summary.whole_percent}%",
        f"{summary.weeks_lived} / {summary.total_weeks} weeks",
    )


def large_stats(summary: ProgressSummary) -> List[Stat]:
    return [
        Stat(str(int(summary.current_age)), "Age"),
        Stat(str(summary.weeks_lived), "Weeks Lived"),
        Stat(str(summary.weeks_remaining), "Weeks Left"),
    ]


# Lock screen


def circular_accessory(summary: ProgressSummary) -> Stat:
    """Gauge centre label (age) with the gauge fraction as value."""
    return Stat(f"{summary.percentage_lived:.4f}", str(int(summary.current_age)))


def rectangular_accessory(summary: ProgressSummary) -> str:
    return f"{summary.weeks_remaining} weeks remaining"


def inline_accessory(summary: ProgressSummary) -> str:
    return f"⏳ {summary.weeks_remaining} weeks left"
