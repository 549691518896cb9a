"""Key-value blob row backing the shared settings store.

One row per key; the life profile lives under a single key and is read by
both the interactive surface and every widget surface.
"""

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class KeyValueBlob(Base, TimestampMixin):
    """Opaque serialized value stored under a string key."""

    __tablename__ = "key_value_blobs"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def __repr__(self) -> str:
        return f"<KeyValueBlob(key={self.key!r}, size={len(self.value or b'')})>"
