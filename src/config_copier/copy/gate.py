"""Single serialization point for user-facing terminal interaction."""

from __future__ import annotations

import threading
from typing import Callable


class ConfirmationGate:
    """Mutual exclusion shared by overwrite prompts and result printing.

    The terminal is a single stream, so a prompt must never be shown while
    another prompt is waiting for an answer or while a result line is being
    written. Hold the gate only around the interaction itself, never around
    file I/O.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def __enter__(self) -> "ConfirmationGate":
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()

    def ask(self, confirm: Callable[[str], bool], question: str) -> bool:
        """Show *question* through *confirm* while holding the gate."""
        with self:
            return bool(confirm(question))


__all__ = ["ConfirmationGate"]
