from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from tests.utils import FakePrompts


@pytest.fixture()
def output_console() -> Console:
    """Console that writes plain text into a buffer wide enough for tmp paths."""
    return Console(file=io.StringIO(), force_terminal=False, width=500)


@pytest.fixture()
def read_output(output_console: Console) -> Callable[[], str]:
    def _read() -> str:
        return output_console.file.getvalue()  # type: ignore[attr-defined]

    return _read


@pytest.fixture()
def source_root(tmp_path: Path) -> Path:
    root = tmp_path / "configs"
    root.mkdir()
    return root


@pytest.fixture()
def write_source(source_root: Path) -> Callable[[str, bytes], Path]:
    def _write(relative: str, content: bytes) -> Path:
        target = source_root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        return target

    return _write


@pytest.fixture()
def fake_prompts() -> FakePrompts:
    return FakePrompts()
