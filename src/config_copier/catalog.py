"""Catalog of named configuration bundles.

The catalog is a YAML document mapping a label to the files that make up
that bundle::

    web:
      - path: nginx.conf
    db:
      - path: pg.conf
        post_message: set POSTGRES_PASSWORD

Paths are relative to the base source directory and may not be absolute.
Labels keep document order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Any, Iterable, Iterator, Mapping

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from config_copier.errors import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A single file belonging to a catalog label."""

    path: str
    post_message: str = ""


class Catalog(Mapping[str, tuple[CatalogEntry, ...]]):
    """Read-only mapping of label to its ordered catalog entries."""

    def __init__(self, bundles: Mapping[str, Iterable[CatalogEntry]] | None = None):
        self._bundles: dict[str, tuple[CatalogEntry, ...]] = {
            label: tuple(entries) for label, entries in (bundles or {}).items()
        }

    def __getitem__(self, label: str) -> tuple[CatalogEntry, ...]:
        return self._bundles[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    def __repr__(self) -> str:
        return f"Catalog({list(self._bundles)!r})"

    def labels(self) -> list[str]:
        """Return all labels in document order."""
        return list(self._bundles)

    def resolve(self, selection: Iterable[str]) -> list[CatalogEntry]:
        """Flatten selected labels into the list of files to copy.

        Entries follow selection order, then catalog order. Nothing is
        deduplicated: a file reachable through two selected labels is copied
        twice. Labels missing from the catalog contribute nothing.
        """
        resolved: list[CatalogEntry] = []
        for label in selection:
            entries = self._bundles.get(label)
            if entries is None:
                logger.warning("Skipping unknown catalog label: %s", label)
                continue
            resolved.extend(entries)
        return resolved


def _parse_entry(label: str, index: int, raw: Any) -> CatalogEntry:
    if not isinstance(raw, dict):
        raise CatalogError(f"Entry {index} of '{label}' must be a mapping with a 'path' key")

    path = raw.get("path")
    if not isinstance(path, str) or not path.strip():
        raise CatalogError(f"Entry {index} of '{label}' is missing a non-empty 'path'")
    path = path.strip()
    if PurePosixPath(path).is_absolute() or PureWindowsPath(path).anchor:
        raise CatalogError(f"Entry {index} of '{label}' must be a relative path, got {path!r}")

    post_message = raw.get("post_message") or ""
    if not isinstance(post_message, str):
        raise CatalogError(f"Entry {index} of '{label}' has a non-string 'post_message'")

    return CatalogEntry(path=path, post_message=post_message)


def parse_catalog(data: Any) -> Catalog:
    """Build a Catalog from an already-decoded YAML document."""
    if data is None:
        return Catalog()
    if not isinstance(data, dict):
        raise CatalogError("Catalog must map labels to lists of files")

    bundles: dict[str, list[CatalogEntry]] = {}
    for label, raw_entries in data.items():
        label = str(label)
        if raw_entries is None:
            bundles[label] = []
            continue
        if not isinstance(raw_entries, list):
            raise CatalogError(f"Label '{label}' must contain a list of files")
        bundles[label] = [_parse_entry(label, i, raw) for i, raw in enumerate(raw_entries)]
    return Catalog(bundles)


def load_catalog(catalog_path: Path) -> Catalog:
    """Load and validate the catalog document at *catalog_path*.

    Raises:
        CatalogError: If the file cannot be read or does not describe a catalog.
    """
    yaml = YAML(typ="safe")
    try:
        with open(catalog_path, "r", encoding="utf-8") as handle:
            data = yaml.load(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"failed to read file {catalog_path}: {exc}") from exc
    except YAMLError as exc:
        raise CatalogError(f"failed to parse YAML in {catalog_path}: {exc}") from exc

    catalog = parse_catalog(data)
    logger.debug("Loaded %d catalog labels from %s", len(catalog), catalog_path)
    return catalog


__all__ = ["Catalog", "CatalogEntry", "load_catalog", "parse_catalog"]
