"""
Life Grid Image Rendering

Paints a computed cell partition (plus the surface's stat line) onto a
Pillow image. The layout math lives in grid_layout; this module only draws.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont
from PIL.ImageFont import FreeTypeFont

from ..core.config import get_settings
from ..core.defaults_loader import expand_path
from ..core.typed_config import RenderPalette
from ..core.typed_config_loader import get_render_palette
from ..models.cell_partition import CellPartition
from .life_progress_text import TITLE
from .life_surfaces import SurfaceView

logger = logging.getLogger(__name__)

GRID_PADDING = 16  # pixels around the grid
TEXT_AREA_HEIGHT = 48  # pixels for the stat line under the grid
TEXT_COLOR = (60, 60, 67, 255)

AnyFont = Union[FreeTypeFont, ImageFont.ImageFont]


def _load_font(size: int) -> AnyFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def draw_partition(
    draw: ImageDraw.ImageDraw,
    partition: CellPartition,
    palette: RenderPalette,
    x_offset: float = 0,
    y_offset: float = 0,
) -> None:
    """Fill every cell of ``partition`` in reading order."""
    for cell in partition:
        left, top, right, bottom = cell.rect
        draw.rectangle(
            [x_offset + left, y_offset + top, x_offset + right, y_offset + bottom],
            fill=palette.filled if cell.filled else palette.unfilled,
        )


def render_partition(
    partition: CellPartition,
    width: int,
    height: int,
    palette: Optional[RenderPalette] = None,
) -> Image.Image:
    """Render just the grid onto a ``width`` x ``height`` canvas."""
    if palette is None:
        palette = get_render_palette()

    image = Image.new("RGBA", (max(1, width), max(1, height)), palette.background)
    draw_partition(ImageDraw.Draw(image), partition, palette)
    return image


def render_surface_image(
    view: SurfaceView,
    grid_width: int,
    grid_height: int,
    palette: Optional[RenderPalette] = None,
) -> Image.Image:
    """Render a whole surface: grid, title and stat line.

    Args:
        view: Result of life_surfaces.render_pass for this surface.
        grid_width: Width the partition was computed for.
        grid_height: Height the partition was computed for.
        palette: Colours (defaults to the configured palette).
    """
    if palette is None:
        palette = get_render_palette()

    image_width = grid_width + 2 * GRID_PADDING
    image_height = grid_height + 2 * GRID_PADDING + TEXT_AREA_HEIGHT

    image = Image.new("RGBA", (image_width, image_height), palette.background)
    draw = ImageDraw.Draw(image)

    draw_partition(draw, view.partition, palette, GRID_PADDING, GRID_PADDING)

    font_small = _load_font(11)
    font_medium = _load_font(14)

    text_y = GRID_PADDING + grid_height + 10
    draw.text((GRID_PADDING, text_y), TITLE, fill=TEXT_COLOR, font=font_small)

    stat_line = "   ".join(f"{stat.value} {stat.label}" for stat in view.stats)
    stat_x = image_width - GRID_PADDING - draw.textlength(stat_line, font=font_medium)
    draw.text((stat_x, text_y), stat_line, fill=TEXT_COLOR, font=font_medium)

    return image


def save_surface_png(
    view: SurfaceView,
    grid_width: int,
    grid_height: int,
    output_path: Optional[Path] = None,
) -> Path:
    """Render ``view`` and save it as PNG.

    Returns:
        Path to the written file. Without ``output_path`` the file goes to
        ``Settings.output_dir`` as ``<surface>-<YYYYMMDD>.png``.
    """
    image = render_surface_image(view, grid_width, grid_height)

    if output_path is None:
        output_dir = Path(expand_path(get_settings().output_dir))
        stamp = view.reference.strftime("%Y%m%d")
        output_path = output_dir / f"{view.surface.name}-{stamp}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path, "PNG")
    logger.info("Rendered %s surface: %s", view.surface.name, output_path)
    return output_path
