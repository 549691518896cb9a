from .base import Base, TimestampMixin
from .cell_partition import CellPartition, CellSizing, GridCell
from .display_unit import DisplayUnit
from .key_value_blob import KeyValueBlob
from .life_profile import LifeProfile, default_profile
from .progress import ProgressSummary, UnitProgress

__all__ = [
    "Base",
    "TimestampMixin",
    "CellPartition",
    "CellSizing",
    "GridCell",
    "DisplayUnit",
    "KeyValueBlob",
    "LifeProfile",
    "default_profile",
    "ProgressSummary",
    "UnitProgress",
]
