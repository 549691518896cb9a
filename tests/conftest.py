import logging
import os
from datetime import datetime

import pytest

# Set test environment variables
os.environ["MEMENTO_ENVIRONMENT"] = "test"
os.environ["MEMENTO_LOG_LEVEL"] = "WARNING"

# Friday afternoon; the following Monday is 2026-02-23
REFERENCE = datetime(2026, 2, 20, 15, 30)


@pytest.fixture(autouse=True)
def _strip_file_handlers():
    """Remove file handlers from root logger so tests never write to logs/."""
    root = logging.getLogger()
    saved = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    for h in saved:
        root.removeHandler(h)
    yield
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            root.removeHandler(h)
    for h in saved:
        root.addHandler(h)


@pytest.fixture(autouse=True)
def _fresh_config():
    """Drop cached settings and YAML so env/monkeypatch changes take effect."""
    from memento_mori.core.config import get_settings
    from memento_mori.core.defaults_loader import clear_cache
    from memento_mori.core.typed_config_loader import clear_typed_config_cache

    get_settings.cache_clear()
    clear_cache()
    clear_typed_config_cache()
    yield
    get_settings.cache_clear()
    clear_cache()
    clear_typed_config_cache()


@pytest.fixture
def reference() -> datetime:
    return REFERENCE


@pytest.fixture
def profile():
    from memento_mori.models.life_profile import LifeProfile

    return LifeProfile(birth_date=datetime(1990, 5, 15), life_expectancy_years=80)


@pytest.fixture
def memory_store(reference):
    from memento_mori.services.life_profile_store import (
        InMemoryBlobStore,
        LifeProfileStore,
    )

    return LifeProfileStore(InMemoryBlobStore(), clock=lambda: reference)


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'data' / 'memento_mori.db'}"
