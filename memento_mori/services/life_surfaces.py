"""Render passes: wire the calculator and the layout engine per surface.

Every surface (interactive grid, small/medium/large widgets) goes through
``render_pass`` with the same profile and reference instant, so all of them
agree on the numbers. Inputs are validated here, at the boundary; the
calculation and layout modules below never see out-of-range values.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union

from ..core.errors import (
    UnknownSurfaceError,
    validate_container,
    validate_decimal_places,
    validate_life_expectancy,
)
from ..core.typed_config import RecomputePolicy, SurfaceCatalog, SurfaceLayout
from ..core.typed_config_loader import get_recompute_policy, get_surface_catalog
from ..models.cell_partition import CellPartition
from ..models.display_unit import DisplayUnit
from ..models.life_profile import LifeProfile
from ..models.progress import ProgressSummary, UnitProgress
from . import life_progress_text as text
from .grid_layout import compute_partition, compute_rows
from .life_progress_domain import summarize, unit_progress
from .recompute_schedule import next_recompute_for_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceView:
    """Everything a surface needs to paint one frame."""

    surface: SurfaceLayout
    reference: datetime
    summary: ProgressSummary
    units: UnitProgress
    partition: CellPartition
    stats: List[text.Stat]
    caption: str
    next_refresh: datetime


def resolve_surface(
    surface: Union[str, SurfaceLayout], catalog: Optional[SurfaceCatalog] = None
) -> SurfaceLayout:
    if isinstance(surface, SurfaceLayout):
        return surface
    if catalog is None:
        catalog = get_surface_catalog()
    layout = catalog.get_surface(surface)
    if layout is None:
        raise UnknownSurfaceError(surface, catalog.names)
    return layout


def interactive_grid_height(
    unit: DisplayUnit, life_expectancy_years: int, dot_size: float, spacing: float
) -> float:
    """Natural height of the interactive grid at a given dot size."""
    rows = compute_rows(unit.total_units(life_expectancy_years), unit.columns_per_row)
    if rows == 0:
        return 0.0
    return rows * (dot_size + spacing) - spacing


def _stats_for(
    layout: SurfaceLayout,
    profile: LifeProfile,
    summary: ProgressSummary,
    units: UnitProgress,
) -> List[text.Stat]:
    if layout.style == "small":
        return text.small_stats(units, profile.life_expectancy_years)
    if layout.style == "medium":
        return text.medium_stats(summary)
    if layout.style == "large":
        return [text.large_header(summary)] + text.large_stats(summary)
    return text.interactive_stats(summary)


def render_pass(
    profile: LifeProfile,
    surface: Union[str, SurfaceLayout],
    container_width: float,
    container_height: float,
    reference: Optional[datetime] = None,
    catalog: Optional[SurfaceCatalog] = None,
    policy: Optional[RecomputePolicy] = None,
) -> SurfaceView:
    """Compute summary, grid partition and stats for one surface.

    Args:
        profile: Life profile snapshot from the settings store.
        surface: Surface name from the catalog, or an explicit layout.
        container_width: Canvas width available to the grid.
        container_height: Canvas height available to the grid.
        reference: Instant to render for (defaults to now).
        catalog: Surface catalog (defaults to the configured one).
        policy: Recompute policy (defaults to the configured one).

    Raises:
        InvalidInputError: Negative life expectancy or container size.
        UnknownSurfaceError: Surface name not in the catalog.
    """
    validate_life_expectancy(profile.life_expectancy_years)
    validate_decimal_places(profile.decimal_places)
    validate_container(container_width, container_height)

    layout = resolve_surface(surface, catalog)
    if reference is None:
        reference = datetime.now()
    if policy is None:
        policy = get_recompute_policy()

    summary = summarize(profile, reference)
    units = unit_progress(profile, layout.unit, reference)

    total = units.total_units
    if layout.max_rows is not None:
        total = min(total, layout.max_rows * units.columns_per_row)

    partition = compute_partition(
        total,
        units.columns_per_row,
        container_width,
        container_height,
        layout.min_spacing,
        units_elapsed=units.units_elapsed,
        group_size=layout.group_size,
        band_spacing=layout.band_spacing,
        max_cell_size=layout.max_cell_size,
        sizing=layout.sizing,
    )

    logger.debug(
        "Render pass %s: %dx%d, %d cells (%d filled), cell %.2fx%.2f",
        layout.name,
        container_width,
        container_height,
        len(partition),
        partition.filled_count,
        partition.cell_width,
        partition.cell_height,
    )

    return SurfaceView(
        surface=layout,
        reference=reference,
        summary=summary,
        units=units,
        partition=partition,
        stats=_stats_for(layout, profile, summary, units),
        caption=text.format_progress_caption(summary),
        next_refresh=next_recompute_for_policy(reference, policy),
    )
