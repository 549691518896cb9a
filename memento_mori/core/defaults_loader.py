"""
YAML defaults for the life grid.

Two files, merged key by key (later wins):
1. config/defaults.yaml - checked in (life defaults, week start, palette)
2. config/settings.yaml - optional local overrides, gitignored
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

# (defaults_path, settings_path) the cached config was built from
_cache_key: Optional[Tuple[Path, Path]] = None
_cached_config: Optional[Dict[str, Any]] = None


def get_project_root() -> Path:
    """Checkout root holding ``config/`` (two levels above this package)."""
    return Path(__file__).resolve().parent.parent.parent


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Parsed mapping from ``file_path``; ``{}`` when absent or empty."""
    if not file_path.exists():
        return {}
    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; nested mappings merge too."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def expand_path(path: str) -> str:
    if not path:
        return path
    return os.path.expanduser(os.path.expandvars(path))


def get_nested(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Look up ``"life.default_expectancy_years"``-style dotted keys."""
    node: Any = config
    for part in key_path.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def load_defaults(
    defaults_path: Optional[Path] = None,
    settings_path: Optional[Path] = None,
    reload: bool = False,
) -> Dict[str, Any]:
    """Return the merged configuration, cached per pair of source files.

    Args:
        defaults_path: Base file (default ``config/defaults.yaml``).
        settings_path: Override file (default ``config/settings.yaml``).
        reload: Re-read the files even when a cached copy exists.
    """
    global _cache_key, _cached_config

    config_dir = get_project_root() / "config"
    key = (
        defaults_path or config_dir / "defaults.yaml",
        settings_path or config_dir / "settings.yaml",
    )

    if not reload and _cached_config is not None and _cache_key == key:
        return _cached_config

    config = deep_merge(load_yaml_file(key[0]), load_yaml_file(key[1]))

    _cache_key = key
    _cached_config = config
    return config


def get_config_value(key_path: str, default: Any = None, expand_paths: bool = False) -> Any:
    """Dotted lookup in the merged configuration.

    ``expand_paths`` expands ``~`` and environment variables in string values.
    """
    value = get_nested(load_defaults(), key_path, default)
    if expand_paths and isinstance(value, str):
        return expand_path(value)
    return value


def get_life_default(name: str, default: int) -> int:
    """Integer under ``life.<name>``, e.g. ``default_expectancy_years``."""
    return int(get_config_value(f"life.{name}", default))


def clear_cache() -> None:
    global _cache_key, _cached_config
    _cache_key = None
    _cached_config = None
