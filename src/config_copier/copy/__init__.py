"""Concurrent copy engine and result reporting."""

from .engine import CopyManager, copy_file, join_under
from .gate import ConfirmationGate
from .models import CopyReport, CopyResult
from .reporter import ResultReporter

__all__ = [
    "ConfirmationGate",
    "CopyManager",
    "CopyReport",
    "CopyResult",
    "ResultReporter",
    "copy_file",
    "join_under",
]
