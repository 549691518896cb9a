"""Cell partition: positioned, fill-flagged cells of a life grid."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class CellSizing(str, Enum):
    """How cell edges are derived from the two space constraints."""

    # uniform squares: the tighter of the width and height constraints
    SQUARE = "square"
    # width and height sized independently so the grid fills the container
    FILL = "fill"


@dataclass(frozen=True, slots=True)
class GridCell:
    """One rectangle of the grid. ``index`` is ``row * columns + column``."""

    index: int
    row: int
    column: int
    band: int
    x: float
    y: float
    width: float
    height: float
    filled: bool

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass(frozen=True)
class CellPartition:
    """Layout of a grid for one container size.

    Cells are in reading order: row-major inside each band, bands ascending.
    """

    total_units: int
    columns: int
    rows: int
    band_count: int
    cell_width: float
    cell_height: float
    min_spacing: float
    band_spacing: float
    occupied_width: float
    occupied_height: float
    cells: List[GridCell] = field(default_factory=list)

    def __iter__(self) -> Iterator[GridCell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if cell.filled)

    def cell_at(self, x: float, y: float) -> Optional[GridCell]:
        """Return the cell under point (x, y), or None for gaps and margins."""
        for cell in self.cells:
            if cell.y > y:
                break
            if cell.contains(x, y):
                return cell
        return None
