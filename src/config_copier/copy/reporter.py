"""Print copy outcomes as they arrive and summarize the batch."""

from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from .gate import ConfirmationGate
from .models import CopyReport, CopyResult

logger = logging.getLogger(__name__)


class ResultReporter:
    """Consume CopyResults from concurrent producers.

    Results arrive in completion order, not catalog order. Each line is
    printed under the confirmation gate so it never lands in the middle of
    an overwrite prompt.
    """

    def __init__(self, console: Console, gate: ConfirmationGate):
        self.console = console
        self.gate = gate

    def drain(self, results: Iterable[CopyResult]) -> CopyReport:
        """Print every result, then the summary and post-copy messages.

        Returns:
            CopyReport whose ``error`` is set when at least one copy failed.
        """
        report = CopyReport()

        for result in results:
            with self.gate:
                self._record(report, result)

        self.console.print()
        if report.error_count > 0:
            self.console.print(f"[red]ERROR[/red] Completed with {report.error_count} errors")
        else:
            self.console.print(f"[green]SUCCESS[/green] Successfully copied {report.success_count} files")
        self.console.print()

        for result in report.post_messages:
            self.console.print(
                f"[cyan]INFO[/cyan] {escape(result.destination)}: {escape(result.post_message)}"
            )

        logger.debug(
            "Batch finished: %d copied, %d failed", report.success_count, report.error_count
        )
        return report

    def _record(self, report: CopyReport, result: CopyResult) -> None:
        report.results.append(result)
        if result.ok:
            report.success_count += 1
            self.console.print(
                f"[green]SUCCESS[/green] Successfully copied "
                f"{escape(result.source)} to {escape(result.destination)}"
            )
            if result.post_message:
                report.post_messages.append(result)
        else:
            report.error_count += 1
            self.console.print(
                f"[red]ERROR[/red] Failed to copy {escape(result.source)} to "
                f"{escape(result.destination)}: {escape(str(result.error))}"
            )


__all__ = ["ResultReporter"]
