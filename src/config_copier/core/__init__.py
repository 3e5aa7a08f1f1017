"""Core settings shared by the CLI and the copy engine."""

from .config import (
    CATALOG_ENV_VAR,
    DEFAULT_CATALOG_PATH,
    DEFAULT_SOURCE_DIR,
    SOURCE_DIR_ENV_VAR,
    resolve_catalog_path,
    resolve_source_dir,
)

__all__ = [
    "CATALOG_ENV_VAR",
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_SOURCE_DIR",
    "SOURCE_DIR_ENV_VAR",
    "resolve_catalog_path",
    "resolve_source_dir",
]
