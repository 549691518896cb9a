"""
Typed configuration domain objects.

Pydantic-validated, immutable config classes:
- SurfaceLayout / SurfaceCatalog  (life_surfaces.py)
- RecomputePolicy                 (recompute_schedule.py)
- RenderPalette                   (life_grid_image.py)
"""

import logging
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from ..models.cell_partition import CellSizing
from ..models.display_unit import DisplayUnit

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Render surfaces
# ---------------------------------------------------------------------------


# Which stat block accompanies the grid
SURFACE_STYLES = {"interactive", "small", "medium", "large"}


class SurfaceLayout(BaseModel):
    """Grid parameters for one rendering surface (app view or widget size)."""

    model_config = ConfigDict(frozen=True)

    name: str
    unit: DisplayUnit
    style: str = "interactive"
    sizing: CellSizing = CellSizing.SQUARE
    min_spacing: float = 1.0
    group_size: Optional[int] = None
    band_spacing: Optional[float] = None
    max_cell_size: Optional[float] = None
    max_rows: Optional[int] = None

    @field_validator("style")
    @classmethod
    def style_known(cls, v: str) -> str:
        if v not in SURFACE_STYLES:
            raise ValueError(f"style must be one of {sorted(SURFACE_STYLES)}, got '{v}'")
        return v

    @field_validator("min_spacing")
    @classmethod
    def spacing_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("min_spacing must be >= 0")
        return v

    @field_validator("band_spacing", "max_cell_size")
    @classmethod
    def optional_non_negative(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("group_size", "max_rows")
    @classmethod
    def optional_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("must be > 0")
        return v


class SurfaceCatalog(BaseModel):
    """All named surfaces with a default."""

    model_config = ConfigDict(frozen=True)

    surfaces: Dict[str, SurfaceLayout]
    default_surface: str = "large"

    def get_surface(self, name: str) -> Optional[SurfaceLayout]:
        return self.surfaces.get(name)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.surfaces)


# ---------------------------------------------------------------------------
# Recompute cadence
# ---------------------------------------------------------------------------


class RecomputePolicy(BaseModel):
    """When glanceable surfaces should be recomputed."""

    model_config = ConfigDict(frozen=True)

    first_weekday: int = 0  # 0=Monday

    @field_validator("first_weekday")
    @classmethod
    def weekday_in_range(cls, v: int) -> int:
        if not 0 <= v <= 6:
            raise ValueError(f"first_weekday must be 0-6, got {v}")
        return v


# ---------------------------------------------------------------------------
# Render palette
# ---------------------------------------------------------------------------

RGBA = Tuple[int, int, int, int]


class RenderPalette(BaseModel):
    """Colours used when painting a partition to an image."""

    model_config = ConfigDict(frozen=True)

    background: RGBA = (255, 255, 255, 255)
    filled: RGBA = (28, 28, 30, 255)
    unfilled: RGBA = (229, 229, 234, 255)

    @field_validator("background", "filled", "unfilled")
    @classmethod
    def channels_in_range(cls, v: RGBA) -> RGBA:
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"colour channels must be 0-255, got {v}")
        return v
