"""Exception hierarchy for config-copier."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .copy.models import CopyReport


class ConfigCopierError(Exception):
    """Base exception for config-copier errors."""


class CatalogError(ConfigCopierError):
    """Raised when the catalog document cannot be read or is malformed."""


class PathValidationError(ConfigCopierError, ValueError):
    """Raised when a user-supplied project path is not usable."""


class DestinationError(ConfigCopierError):
    """Raised when the destination root cannot be created."""


class OverwriteCancelledError(ConfigCopierError):
    """The user declined to overwrite an existing destination file."""

    def __init__(self, destination: str | None = None):
        self.destination = destination
        super().__init__("overwrite cancelled by user")


class CopyBatchError(ConfigCopierError):
    """At least one file in a batch failed to copy.

    The batch is not transactional: files that copied successfully stay in
    place, and the full report is kept on the exception.
    """

    def __init__(self, error_count: int, report: "CopyReport | None" = None):
        self.error_count = error_count
        self.report = report
        super().__init__(f"{error_count} files failed to copy")


__all__ = [
    "CatalogError",
    "ConfigCopierError",
    "CopyBatchError",
    "DestinationError",
    "OverwriteCancelledError",
    "PathValidationError",
]
