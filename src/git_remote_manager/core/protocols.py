"""Protocols (interfaces) consumed by the core and session layers.

These define the contracts that adapters must satisfy.  The session
depends ONLY on these protocols — never on questionary or subprocess
directly — so every step can be driven by fakes in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from git_remote_manager.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for external command execution.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        """Run *program* with *args* and block until it exits.

        Implementations must raise
        :class:`~git_remote_manager.exceptions.CommandFailedError` on a
        non-zero exit status and
        :class:`~git_remote_manager.exceptions.GitNotFoundError` when
        *program* cannot be located.
        """
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for reading one line of user input."""

    def ask(self, message: str) -> str:
        """Show *message* and return the user's answer verbatim.

        Raises
        ------
        PromptCancelledError
            When the user cancels the prompt.
        """
        ...  # pragma: no cover
