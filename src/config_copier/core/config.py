"""Default locations and environment overrides.

Resolution order for every setting: explicit argument, then environment
variable, then the built-in default.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CATALOG_PATH = "config.yaml"
DEFAULT_SOURCE_DIR = "./configs"

CATALOG_ENV_VAR = "CONFIG_COPIER_CATALOG"
SOURCE_DIR_ENV_VAR = "CONFIG_COPIER_SOURCE_DIR"


def _resolve(explicit: str | Path | None, env_var: str, default: str) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    if env_value := os.environ.get(env_var, "").strip():
        return Path(env_value).expanduser()
    return Path(default)


def resolve_catalog_path(explicit: str | Path | None = None) -> Path:
    """Return the catalog document to load."""
    return _resolve(explicit, CATALOG_ENV_VAR, DEFAULT_CATALOG_PATH)


def resolve_source_dir(explicit: str | Path | None = None) -> Path:
    """Return the base directory catalog paths are resolved against."""
    return _resolve(explicit, SOURCE_DIR_ENV_VAR, DEFAULT_SOURCE_DIR)


__all__ = [
    "CATALOG_ENV_VAR",
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_SOURCE_DIR",
    "SOURCE_DIR_ENV_VAR",
    "resolve_catalog_path",
    "resolve_source_dir",
]
