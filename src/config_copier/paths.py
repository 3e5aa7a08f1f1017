"""Normalize and validate the project path typed by the user."""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
import sys

from config_copier.errors import PathValidationError

MAX_PATH_LENGTH = 4096  # typical PATH_MAX
WINDOWS_INVALID_CHARS = '<>"|?*'
_WINDOWS_RESERVED_NAMES = re.compile(r"^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])(\..*)?$", re.IGNORECASE)


def _is_windows(platform: str | None) -> bool:
    return (platform or sys.platform) == "win32"


def _validate_windows(normalized: str) -> None:
    for char in WINDOWS_INVALID_CHARS:
        if char in normalized:
            raise PathValidationError(f"file path contains invalid character: {char}")

    base = ntpath.basename(normalized)
    if _WINDOWS_RESERVED_NAMES.match(base):
        raise PathValidationError(f"file path uses reserved Windows name: {base}")

    if base.endswith((" ", ".")) and base not in (".", ".."):
        raise PathValidationError("file path cannot end with a space or dot on Windows")


def normalize_project_path(raw: str, platform: str | None = None) -> str:
    """Return a cleaned version of *raw* suitable as a copy destination.

    Surrounding single quotes (added by terminals on drag-and-drop) are
    stripped, ``~`` is expanded, and redundant separators and ``..``
    segments are collapsed. Relative paths stay relative.

    Args:
        raw: Path exactly as typed by the user.
        platform: ``sys.platform`` value to validate for; defaults to the
            running interpreter's platform.

    Raises:
        PathValidationError: If the path is empty or unusable on the platform.
    """
    if not raw or not raw.strip():
        raise PathValidationError("file path cannot be empty")

    try:
        raw.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathValidationError("file path contains invalid UTF-8 characters") from exc

    if "\x00" in raw:
        raise PathValidationError("file path contains invalid null character")

    windows = _is_windows(platform)
    pathmod = ntpath if windows else posixpath
    stripped = raw.strip().strip("'")
    if not stripped:
        raise PathValidationError("file path cannot be empty")

    if pathmod is os.path:
        stripped = os.path.expanduser(stripped)
    normalized = pathmod.normpath(stripped)

    try:
        if windows:
            _validate_windows(normalized)
        elif len(normalized) > MAX_PATH_LENGTH:
            raise PathValidationError("file path is too long")
    except PathValidationError as exc:
        raise PathValidationError(f"file path is not valid: {normalized} ({exc})") from exc

    return normalized


__all__ = ["MAX_PATH_LENGTH", "normalize_project_path"]
