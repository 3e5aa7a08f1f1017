"""Records exchanged between copy tasks and the result reporter."""

from __future__ import annotations

from dataclasses import dataclass, field

from config_copier.errors import CopyBatchError


@dataclass(frozen=True)
class CopyResult:
    """Outcome of one file copy attempt.

    Produced exactly once by the task that attempted the copy and handed to
    the reporter through the result queue. ``post_message`` is only carried
    for successful copies.
    """

    source: str
    destination: str
    error: BaseException | None = None
    post_message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CopyReport:
    """Aggregate of every CopyResult drained from one batch."""

    success_count: int = 0
    error_count: int = 0
    results: list[CopyResult] = field(default_factory=list)
    post_messages: list[CopyResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success_count + self.error_count

    @property
    def failures(self) -> list[CopyResult]:
        return [result for result in self.results if not result.ok]

    @property
    def error(self) -> CopyBatchError | None:
        """Batch-level error, present when any file failed."""
        if self.error_count > 0:
            return CopyBatchError(self.error_count, report=self)
        return None


__all__ = ["CopyReport", "CopyResult"]
