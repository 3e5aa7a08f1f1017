"""Concurrent copy engine.

Every selected file gets its own thread. Threads push exactly one
CopyResult each onto a result queue; a closer thread waits for all of them
and then closes the stream, while the calling thread drains the queue
through the ResultReporter. Overwrite prompts and result printing share a
single ConfirmationGate so terminal interaction never interleaves.
"""

from __future__ import annotations

import logging
import os
import queue
import shutil
import threading
from contextlib import nullcontext
from pathlib import Path, PurePath
from typing import Callable, Iterator, Sequence, cast

from rich.console import Console

from config_copier.catalog import CatalogEntry
from config_copier.errors import DestinationError, OverwriteCancelledError

from .gate import ConfirmationGate
from .models import CopyReport, CopyResult
from .reporter import ResultReporter

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]

_CLOSED = object()


def copy_file(source: Path, destination: Path) -> None:
    """Stream *source* into *destination* and fsync it.

    Intermediate directories of *destination* are created. An existing
    destination file is truncated.

    Raises:
        OSError: On the first failing step (open, mkdir, write, flush).
    """
    with open(source, "rb") as src:
        parent = destination.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create directory path {parent}: {exc}") from exc

        with open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
            dst.flush()
            os.fsync(dst.fileno())


def join_under(root: Path, relative: str) -> Path:
    """Join *relative* below *root*, dropping any drive or root anchor.

    ``Path("/a") / "/b"`` is ``/b``; this keeps the result inside *root*.
    """
    pure = PurePath(relative)
    parts = pure.parts[1:] if pure.anchor else pure.parts
    return Path(root).joinpath(*parts)


def _iter_results(results: queue.Queue[CopyResult | object]) -> Iterator[CopyResult]:
    while True:
        item = results.get()
        if item is _CLOSED:
            return
        yield cast(CopyResult, item)


class CopyManager:
    """Copy catalog entries into a project directory concurrently.

    Args:
        source_root: Directory catalog entry paths are relative to.
        confirm: Yes/no prompt used when a destination already exists.
            Always called while holding the confirmation gate.
        console: Console used for result output.
        max_workers: Cap on simultaneous file copies. ``None`` means one
            running copy per file.
    """

    def __init__(
        self,
        source_root: Path,
        confirm: ConfirmFn,
        console: Console | None = None,
        max_workers: int | None = None,
    ):
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.source_root = Path(source_root)
        self.confirm = confirm
        self.console = console or Console()
        self.gate = ConfirmationGate()
        self.reporter = ResultReporter(self.console, self.gate)
        self._slots = threading.BoundedSemaphore(max_workers) if max_workers else None

    def copy_all(self, files: Sequence[CatalogEntry], destination_root: Path) -> CopyReport:
        """Copy every entry of *files* below *destination_root*.

        A failed or declined file never stops its siblings, and files that
        were copied stay in place when others fail.

        Returns:
            CopyReport for the batch when every file was copied.

        Raises:
            DestinationError: If *destination_root* cannot be created.
            CopyBatchError: If any file failed; carries the full report.
        """
        destination_root = Path(destination_root)
        try:
            destination_root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DestinationError(f"failed to create destination directory: {exc}") from exc

        # Room for every result plus the close marker: producers never block.
        results: queue.Queue[CopyResult | object] = queue.Queue(maxsize=len(files) + 1)

        workers = [
            threading.Thread(
                target=self._run_task,
                args=(entry, join_under(destination_root, entry.path), results),
                name=f"copy-{index}",
                daemon=True,
            )
            for index, entry in enumerate(files)
        ]
        logger.debug("Starting %d copy tasks into %s", len(workers), destination_root)
        for worker in workers:
            worker.start()

        closer = threading.Thread(
            target=self._close_when_done, args=(workers, results), name="copy-closer", daemon=True
        )
        closer.start()

        report = self.reporter.drain(_iter_results(results))
        closer.join()

        error = report.error
        if error is not None:
            raise error
        return report

    def _run_task(self, entry: CatalogEntry, destination: Path, results: queue.Queue[CopyResult | object]) -> None:
        result = CopyResult(
            entry.path, str(destination), error=RuntimeError("copy task did not complete")
        )
        try:
            result = self._copy_one(entry, destination)
        except Exception as exc:
            result = CopyResult(entry.path, str(destination), error=exc)
        finally:
            if not result.ok:
                logger.debug("Copy of %s failed: %s", entry.path, result.error)
            results.put(result)

    def _copy_one(self, entry: CatalogEntry, destination: Path) -> CopyResult:
        if destination.exists():
            question = f"File {destination} already exists. Overwrite?"
            if not self.gate.ask(self.confirm, question):
                return CopyResult(
                    entry.path,
                    str(destination),
                    error=OverwriteCancelledError(str(destination)),
                )

        with self._slots or nullcontext():
            copy_file(join_under(self.source_root, entry.path), destination)

        logger.debug("Copied %s to %s", entry.path, destination)
        return CopyResult(entry.path, str(destination), post_message=entry.post_message)

    @staticmethod
    def _close_when_done(workers: list[threading.Thread], results: queue.Queue[CopyResult | object]) -> None:
        for worker in workers:
            worker.join()
        results.put(_CLOSED)


__all__ = ["CopyManager", "copy_file", "join_under"]
