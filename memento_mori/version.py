"""Single source of truth for the package version.

Uses the installed distribution metadata, falling back to pyproject.toml
when running from a source checkout that was never installed.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
DISTRIBUTION_NAME = "memento-mori"


def get_version() -> str:
    """Return the version string of the memento-mori distribution."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pyproject_path = _PROJECT_ROOT / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]


__version__: str = get_version()
