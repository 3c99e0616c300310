"""Subprocess-backed implementation of :class:`~git_remote_manager.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns
processes.  ``FileNotFoundError`` is re-raised as
:class:`~git_remote_manager.exceptions.GitNotFoundError` and a non-zero
exit status as :class:`~git_remote_manager.exceptions.CommandFailedError`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from git_remote_manager.core.models import CommandResult
from git_remote_manager.exceptions import CommandFailedError, GitNotFoundError
from git_remote_manager.infra.git_detector import install_hint


class SubprocessRunner:
    """Run commands in *cwd* (the process working directory by default).

    No timeout is applied: a command blocks until it exits.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd: Path | None = cwd

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        argv = [program, *args]
        try:
            completed = subprocess.run(
                argv,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitNotFoundError(
                f"{program} is not installed or not on PATH.",
                hint=install_hint(),
            ) from exc

        result = CommandResult(
            argv=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
        if not result.ok:
            raise CommandFailedError(result, hint=_failure_hint(result))
        return result


def _failure_hint(result: CommandResult) -> str | None:
    """Suggest a fix for well-known git failures."""
    stderr = result.stderr.lower()
    if "already exists" in stderr:
        return "Remove the existing remote first: git remote remove origin"
    if "not a git repository" in stderr:
        return "Run git init first, or change into an existing repository."
    return None
