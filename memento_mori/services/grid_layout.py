"""Grid layout for life grids.

Turns (unit count, columns per row, container size, spacing) into positioned
cells. Optional banding clusters rows into groups (e.g. decades of week rows)
separated by a wider gap; banding moves cells, it never changes which cells
are filled.

Inputs are assumed sanitized (non-negative sizes, positive column count);
validation happens at the orchestration boundary.
"""

import math
from typing import List, Optional, Tuple

from ..models.cell_partition import CellPartition, CellSizing, GridCell

# Smallest edge a cell may shrink to; keeps cells visible when the
# container is too small for the unit count.
MIN_CELL_SIZE = 0.5


def compute_rows(total_units: int, columns_per_row: int) -> int:
    if total_units <= 0:
        return 0
    return math.ceil(total_units / max(1, columns_per_row))


def band_count(rows: int, group_size: Optional[int]) -> int:
    """Number of row bands; a grid without grouping is a single band."""
    if rows <= 0:
        return 0
    if not group_size or group_size <= 0:
        return 1
    return math.ceil(rows / group_size)


def _clamp_edge(
    size: float, max_cell_size: Optional[float], min_cell_size: float
) -> float:
    if max_cell_size is not None:
        size = min(size, max_cell_size)
    return max(min_cell_size, size)


def compute_cell_size(
    columns_per_row: int,
    rows: int,
    container_width: float,
    container_height: float,
    min_spacing: float,
    group_size: Optional[int] = None,
    band_spacing: Optional[float] = None,
    sizing: CellSizing = CellSizing.SQUARE,
    max_cell_size: Optional[float] = None,
    min_cell_size: float = MIN_CELL_SIZE,
) -> Tuple[float, float]:
    """Return (cell_width, cell_height) for the given container.

    Height available to cells loses ``(bands - 1) * (band_spacing -
    min_spacing)`` when grouping is on, so a band spacing equal to the
    minimum spacing lays out exactly like no grouping at all.
    """
    columns = max(1, columns_per_row)
    divisor_rows = max(1, rows)
    if band_spacing is None:
        band_spacing = min_spacing

    extra_band_gaps = 0.0
    if group_size:
        extra_band_gaps = max(0, band_count(rows, group_size) - 1) * (
            band_spacing - min_spacing
        )

    width_constrained = (container_width - (columns - 1) * min_spacing) / columns
    height_constrained = (
        container_height - (divisor_rows - 1) * min_spacing - extra_band_gaps
    ) / divisor_rows

    if sizing is CellSizing.SQUARE:
        edge = _clamp_edge(
            min(width_constrained, height_constrained), max_cell_size, min_cell_size
        )
        return edge, edge

    return (
        _clamp_edge(width_constrained, max_cell_size, min_cell_size),
        _clamp_edge(height_constrained, max_cell_size, min_cell_size),
    )


def compute_partition(
    total_units: int,
    columns_per_row: int,
    container_width: float,
    container_height: float,
    min_spacing: float,
    units_elapsed: int = 0,
    group_size: Optional[int] = None,
    band_spacing: Optional[float] = None,
    max_cell_size: Optional[float] = None,
    sizing: CellSizing = CellSizing.SQUARE,
    min_cell_size: float = MIN_CELL_SIZE,
) -> CellPartition:
    """Lay out ``total_units`` cells inside the container.

    Args:
        total_units: Number of cells to place (the last row may be partial).
        columns_per_row: Cells per full row.
        container_width: Available width.
        container_height: Available height.
        min_spacing: Gap between neighbouring cells, both axes.
        units_elapsed: Cells with a linear index below this are filled.
        group_size: Rows per band; None or 0 disables grouping.
        band_spacing: Gap between bands (defaults to ``min_spacing``).
        max_cell_size: Optional cap on either cell edge.
        sizing: Square cells or independent width/height.
        min_cell_size: Floor for either cell edge.

    Returns:
        CellPartition with cells in row-major order. Cells that do not fit
        are still positioned; clipping is up to the render surface.
    """
    columns = max(1, columns_per_row)
    if group_size is not None and group_size <= 0:
        group_size = None
    rows = compute_rows(total_units, columns)
    bands = band_count(rows, group_size)
    if band_spacing is None or not group_size:
        band_spacing = min_spacing

    cell_width, cell_height = compute_cell_size(
        columns,
        rows,
        container_width,
        container_height,
        min_spacing,
        group_size=group_size,
        band_spacing=band_spacing,
        sizing=sizing,
        max_cell_size=max_cell_size,
        min_cell_size=min_cell_size,
    )

    band_extra = band_spacing - min_spacing
    step_x = cell_width + min_spacing
    step_y = cell_height + min_spacing

    cells: List[GridCell] = []
    for index in range(max(0, total_units)):
        row, column = divmod(index, columns)
        band = row // group_size if group_size else 0
        cells.append(
            GridCell(
                index=index,
                row=row,
                column=column,
                band=band,
                x=column * step_x,
                y=row * step_y + band * band_extra,
                width=cell_width,
                height=cell_height,
                filled=index < units_elapsed,
            )
        )

    used_columns = min(columns, max(0, total_units))
    occupied_width = used_columns * step_x - min_spacing if used_columns else 0.0
    occupied_height = (
        rows * step_y - min_spacing + (bands - 1) * band_extra if rows else 0.0
    )

    return CellPartition(
        total_units=max(0, total_units),
        columns=columns,
        rows=rows,
        band_count=bands,
        cell_width=cell_width,
        cell_height=cell_height,
        min_spacing=min_spacing,
        band_spacing=band_spacing,
        occupied_width=occupied_width,
        occupied_height=occupied_height,
        cells=cells,
    )
