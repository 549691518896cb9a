"""
Typed config loader: parses YAML into typed domain objects.

Each loader reads a specific config file and returns an immutable Pydantic
model, falling back to built-in values when the file is missing or invalid.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..models.cell_partition import CellSizing
from ..models.display_unit import DisplayUnit
from .defaults_loader import get_config_value, get_project_root
from .typed_config import RecomputePolicy, RenderPalette, SurfaceCatalog, SurfaceLayout

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Raw YAML loading helper
# ---------------------------------------------------------------------------


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning("Config file not found: %s", path)
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load %s: %s", path, e)
        return {}


# ---------------------------------------------------------------------------
# Surface catalog
# ---------------------------------------------------------------------------

FALLBACK_CATALOG = SurfaceCatalog(
    surfaces={
        "interactive-weeks": SurfaceLayout(
            name="interactive-weeks",
            unit=DisplayUnit.WEEK,
            min_spacing=1.0,
            max_cell_size=3.0,
        ),
        "interactive-months": SurfaceLayout(
            name="interactive-months",
            unit=DisplayUnit.MONTH,
            min_spacing=2.0,
            max_cell_size=6.0,
        ),
        "interactive-years": SurfaceLayout(
            name="interactive-years",
            unit=DisplayUnit.YEAR,
            min_spacing=2.0,
            max_cell_size=10.0,
        ),
        "small": SurfaceLayout(
            name="small",
            unit=DisplayUnit.YEAR,
            style="small",
            min_spacing=3.0,
            max_cell_size=8.0,
            max_rows=9,
        ),
        "medium": SurfaceLayout(
            name="medium",
            unit=DisplayUnit.WEEK,
            style="medium",
            sizing=CellSizing.FILL,
            min_spacing=0.5,
            group_size=10,
            band_spacing=2.0,
        ),
        "large": SurfaceLayout(
            name="large",
            unit=DisplayUnit.WEEK,
            style="large",
            sizing=CellSizing.FILL,
            min_spacing=0.5,
            group_size=10,
            band_spacing=3.0,
        ),
    },
    default_surface="large",
)


def load_surface_catalog(path: Optional[Path] = None) -> SurfaceCatalog:
    """Parse surfaces.yaml into a SurfaceCatalog."""
    if path is None:
        path = get_project_root() / "config" / "surfaces.yaml"

    raw = _load_yaml(path)
    if not raw or "surfaces" not in raw:
        return FALLBACK_CATALOG

    surfaces: Dict[str, SurfaceLayout] = {}
    for name, data in (raw.get("surfaces") or {}).items():
        if not isinstance(data, dict):
            continue
        try:
            surfaces[name] = SurfaceLayout(name=name, **data)
        except ValidationError as e:
            logger.error("Invalid surface %r in %s: %s", name, path, e)

    if not surfaces:
        return FALLBACK_CATALOG

    default_surface = raw.get("default_surface", FALLBACK_CATALOG.default_surface)
    if default_surface not in surfaces:
        default_surface = next(iter(surfaces))

    return SurfaceCatalog(surfaces=surfaces, default_surface=default_surface)


# ---------------------------------------------------------------------------
# Recompute policy / palette (from defaults.yaml)
# ---------------------------------------------------------------------------


def load_recompute_policy() -> RecomputePolicy:
    try:
        return RecomputePolicy(
            first_weekday=int(get_config_value("schedule.first_weekday", 0))
        )
    except (TypeError, ValueError) as e:
        logger.error("Invalid schedule config, using defaults: %s", e)
        return RecomputePolicy()


def load_render_palette() -> RenderPalette:
    raw = get_config_value("render.palette", {}) or {}
    try:
        return RenderPalette(**{k: tuple(v) for k, v in raw.items() if v is not None})
    except (TypeError, ValueError) as e:
        logger.error("Invalid render palette config, using defaults: %s", e)
        return RenderPalette()


# ---------------------------------------------------------------------------
# Cached accessors
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_surface_catalog() -> SurfaceCatalog:
    return load_surface_catalog()


@lru_cache(maxsize=1)
def get_recompute_policy() -> RecomputePolicy:
    return load_recompute_policy()


@lru_cache(maxsize=1)
def get_render_palette() -> RenderPalette:
    return load_render_palette()


def clear_typed_config_cache() -> None:
    get_surface_catalog.cache_clear()
    get_recompute_policy.cache_clear()
    get_render_palette.cache_clear()
