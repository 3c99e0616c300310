"""Shared pytest fixtures and configuration for the git-remote-manager suite.

Guidelines
----------
* No real git invocation — commands go through ``FakeRunner`` or a
  mocked ``subprocess.run``.
* No real terminal — answers come from ``FakePrompter``.
* Settings files live under ``tmp_path``; the real home is never read.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import pytest

from git_remote_manager.core.models import CommandResult
from git_remote_manager.exceptions import CommandFailedError
from git_remote_manager.infra.settings_store import SETTINGS_FILE_NAME


class FakePrompter:
    """Replays scripted answers and records every prompt message."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.messages: list[str] = []

    def ask(self, message: str) -> str:
        self.messages.append(message)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {message!r}")
        return self._answers.pop(0)


class FakeRunner:
    """Records commands; fails on the call numbered *fail_on* (0-based)."""

    def __init__(self, *, fail_on: int | None = None, stderr: str = "") -> None:
        self.calls: list[tuple[str, ...]] = []
        self._fail_on = fail_on
        self._stderr = stderr

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        argv = (program, *args)
        failing = self._fail_on == len(self.calls)
        self.calls.append(argv)
        result = CommandResult(
            argv=argv,
            returncode=3 if failing else 0,
            stdout="",
            stderr=self._stderr if failing else "",
        )
        if failing:
            raise CommandFailedError(result)
        return result


ROOTS: list[dict[str, Any]] = [
    {"name": "github", "basePath": "git@github.com:me", "type": "Remote"},
    {"name": "nas", "basePath": "/mnt/nas/git", "type": "LocalBare"},
    {"name": "work", "basePath": "/home/me/src", "type": "LocalNonBare"},
]


def write_settings(home: Path, data: Any) -> Path:
    """Write *data* as the settings file under *home*."""
    path = home / SETTINGS_FILE_NAME
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def settings_env(tmp_path: Path) -> dict[str, str]:
    """Environment whose ``HOME`` holds a settings file with three roots."""
    write_settings(tmp_path, {"repositoryRoots": ROOTS})
    return {"HOME": str(tmp_path)}
