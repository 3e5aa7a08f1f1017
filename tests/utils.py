"""Shared test doubles for config-copier tests."""

from __future__ import annotations

import threading
from typing import Callable, Iterable

import typer

PROCEED_QUESTION = "Do you want to proceed?"


class FakePrompts:
    """PromptProvider double that answers from canned values and records calls."""

    def __init__(
        self,
        text: str = "",
        selection: Iterable[str] = (),
        proceed: bool = True,
        overwrite: bool | Callable[[str], bool] = True,
        cancel_selection: bool = False,
    ):
        self.text = text
        self.selection = list(selection)
        self.proceed = proceed
        self.overwrite = overwrite
        self.cancel_selection = cancel_selection
        self.questions: list[str] = []
        self.multiselect_options: list[str] = []
        self._lock = threading.Lock()

    def text_input(self, prompt_text: str) -> str:
        with self._lock:
            self.questions.append(prompt_text)
        return self.text

    def multiselect(self, prompt_text: str, options):
        with self._lock:
            self.questions.append(prompt_text)
        self.multiselect_options = list(options)
        if self.cancel_selection:
            raise typer.Abort()
        return list(self.selection)

    def confirm(self, prompt_text: str) -> bool:
        with self._lock:
            self.questions.append(prompt_text)
        if prompt_text == PROCEED_QUESTION:
            return self.proceed
        if callable(self.overwrite):
            return self.overwrite(prompt_text)
        return self.overwrite

    @property
    def overwrite_questions(self) -> list[str]:
        return [q for q in self.questions if q.endswith("already exists. Overwrite?")]

