"""Shared pytest fixtures and configuration for the depshell test suite.

Guidelines
----------
* No terminal interaction in any test: questionary is patched at the
  CLI boundary and the core gets a scripted prompter.
* Core tests run against the in-memory store and a recording sink.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from depshell.core.formatting import Color
from depshell.core.memory_store import InMemoryDependencyStore


class RecordingSink:
    """OutputSink that keeps plain lines and the styled fragments."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.fragments: list[tuple[str, Color | None]] = []
        self._pending: list[str] = []

    def print(self, text: str, style: Color | None = None) -> None:
        self._pending.append(text)
        self.fragments.append((text, style))

    def println(self, text: str = "", style: Color | None = None) -> None:
        if text:
            self.print(text, style)
        self.lines.append("".join(self._pending))
        self._pending = []


class ScriptedPrompter:
    """Confirmation strategy answering from a fixed script.

    Once the script runs out, each question gets its default answer.
    """

    def __init__(self, *answers: bool) -> None:
        self._answers: list[bool] = list(answers)
        self.calls: list[tuple[str, bool]] = []

    def __call__(self, message: str, default: bool) -> bool:
        self.calls.append((message, default))
        if self._answers:
            return self._answers.pop(0)
        return default


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def store() -> InMemoryDependencyStore:
    return InMemoryDependencyStore()


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    return tmp_path / "depshell.json"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("DEPSHELL_PROJECT", "DEPSHELL_ASSUME_YES", "DEPSHELL_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _no_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test non-interactive and free of ANSI codes, even under ``-s``."""
    monkeypatch.setattr("depshell.cli.prompts.stdin_is_interactive", lambda: False)
    monkeypatch.setattr("depshell.cli.app.stdin_is_interactive", lambda: False)
    for key in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(key, raising=False)
