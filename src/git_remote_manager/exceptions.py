"""Custom exception hierarchy for git-remote-manager.

All exceptions that cross layer boundaries must inherit from
:class:`GitRemoteManagerError`.  Raw OS, JSON and subprocess exceptions
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
GitRemoteManagerError
├── ConfigurationError
├── SettingsLoadError
├── UnknownRepositoryRootError
├── PromptCancelledError
├── GitNotFoundError
├── CommandFailedError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from git_remote_manager.core.models import CommandResult


class GitRemoteManagerError(Exception):
    """Base exception for all git-remote-manager errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Settings --------------------------------------------------------------

class ConfigurationError(GitRemoteManagerError):
    """Raised when the home-directory environment variable is unset."""


class SettingsLoadError(GitRemoteManagerError):
    """Raised when the settings file cannot be read or parsed."""


# --- Selection / interaction -----------------------------------------------

class UnknownRepositoryRootError(GitRemoteManagerError):
    """Raised when a selected index does not name a registered root."""


class PromptCancelledError(GitRemoteManagerError):
    """Raised when the user cancels an interactive prompt."""


# --- External commands -----------------------------------------------------

class GitNotFoundError(GitRemoteManagerError):
    """Raised when the git executable cannot be located on PATH."""


class CommandFailedError(GitRemoteManagerError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        result: CommandResult,
        *,
        hint: str | None = None,
    ) -> None:
        rendered = " ".join(result.argv)
        detail = (result.stderr or result.stdout).strip()
        message = f"Command failed ({result.returncode}): {rendered}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message, hint=hint)
        self.result: CommandResult = result


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GitRemoteManagerError):
    """Raised when a required runtime dependency is not available."""
