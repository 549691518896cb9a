"""Life profile store shared by every surface.

Persists the life profile as one JSON record in a key-value blob store
shared by the interactive surface and every widget surface. Reads never
fail: missing, corrupt, or future-dated records resolve to the default
profile. The store is passed explicitly to whoever needs it.
"""

import json
import logging
from datetime import datetime
from typing import Callable, Dict, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy import Engine, select

from ..core.database import make_session_factory, session_scope
from ..core.defaults_loader import get_life_default
from ..models.key_value_blob import KeyValueBlob
from ..models.life_profile import (
    DEFAULT_AGE_YEARS,
    DEFAULT_LIFE_EXPECTANCY_YEARS,
    LifeProfile,
    default_profile,
)
from ..utils.calendar_math import normalize_pair

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_KEY = "lifeData"

Clock = Callable[[], datetime]


class BlobStore(Protocol):
    """Narrow key-value contract the profile store needs."""

    def get_blob(self, key: str) -> Optional[bytes]: ...

    def set_blob(self, key: str, value: bytes) -> None: ...


class InMemoryBlobStore:
    """Process-local blob store, for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None) -> None:
        self._blobs: Dict[str, bytes] = dict(initial or {})

    def get_blob(self, key: str) -> Optional[bytes]:
        return self._blobs.get(key)

    def set_blob(self, key: str, value: bytes) -> None:
        self._blobs[key] = value


class SqlBlobStore:
    """Blob store backed by the ``key_value_blobs`` table."""

    def __init__(self, engine: Engine) -> None:
        self._session_factory = make_session_factory(engine)

    def get_blob(self, key: str) -> Optional[bytes]:
        with session_scope(self._session_factory) as session:
            return session.scalar(
                select(KeyValueBlob.value).where(KeyValueBlob.key == key)
            )

    def set_blob(self, key: str, value: bytes) -> None:
        with session_scope(self._session_factory) as session:
            row = session.get(KeyValueBlob, key)
            if row is None:
                session.add(KeyValueBlob(key=key, value=value))
            else:
                row.value = value
        logger.debug("Stored blob %s (%d bytes)", key, len(value))


class LifeProfileStore:
    """Reads and writes the life profile through a BlobStore.

    Args:
        blob_store: Where the serialized record lives.
        clock: Returns "now"; used for the future-date check and defaults.
        key: Blob key of the record.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        clock: Optional[Clock] = None,
        key: str = DEFAULT_PROFILE_KEY,
    ) -> None:
        self._blob_store = blob_store
        self._clock = clock or datetime.now
        self._key = key

    def default(self) -> LifeProfile:
        return default_profile(
            self._clock(),
            life_expectancy_years=get_life_default(
                "default_expectancy_years", DEFAULT_LIFE_EXPECTANCY_YEARS
            ),
            age_years=get_life_default("default_age_years", DEFAULT_AGE_YEARS),
        )

    def get(self) -> LifeProfile:
        """Return the stored profile, or the default one if it is unusable."""
        raw = self._blob_store.get_blob(self._key)
        if raw is None:
            logger.debug("No stored life profile under %s, using default", self._key)
            return self.default()

        try:
            profile = LifeProfile.model_validate(json.loads(raw))
        except (ValueError, TypeError) as e:
            # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
            kind = "invalid" if isinstance(e, ValidationError) else "undecodable"
            logger.warning("Stored life profile is %s, using default: %s", kind, e)
            return self.default()

        birth, now = normalize_pair(profile.birth_date, self._clock())
        if birth > now:
            logger.warning(
                "Stored life profile has a future birth date (%s), using default",
                profile.birth_date.isoformat(),
            )
            return self.default()

        return profile

    def set(self, profile: LifeProfile) -> None:
        """Persist ``profile``, replacing whatever was stored."""
        payload = json.dumps(profile.to_record()).encode("utf-8")
        self._blob_store.set_blob(self._key, payload)
        logger.info(
            "Saved life profile: birth_date=%s life_expectancy_years=%d",
            profile.birth_date.date().isoformat(),
            profile.life_expectancy_years,
        )
