"""The interactive session: name, settings, selection, confirmation, apply.

Flow:
1. Ask for the repository name (default: working directory name + ``.git``).
2. Load the settings file from the home directory.
3. List the registered roots and ask which to use, in order.
4. Summarise the addresses and ask for confirmation.
5. Add ``origin`` and one push URL per selected root.

Every step blocks until it completes; nothing runs concurrently.
Failures propagate to the error boundary in :mod:`git_remote_manager.cli.app`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from rich.markup import escape

from git_remote_manager.cli import exit_codes
from git_remote_manager.cli.console import console
from git_remote_manager.cli.prompts import (
    prompt_repo_name,
    prompt_root_indexes,
    prompt_yes_no,
)
from git_remote_manager.core.models import GitCommand, RepositoryRoot, Settings
from git_remote_manager.core.protocols import CommandRunner, Prompter
from git_remote_manager.core.remote_service import RemoteService, require_root
from git_remote_manager.core.selection import default_repo_name, select_roots
from git_remote_manager.infra.settings_store import load_settings

CONFIRM_QUESTION: str = "Do you want to add these repositories as the remote origin?"


def _show_registered_roots(settings: Settings) -> None:
    console.print("Registered repositories:")
    for index, root in enumerate(settings.repository_roots):
        console.print(f"\\[{index}] {escape(root.name)}")
    console.print()


def _show_summary(repo_name: str, roots: Sequence[RepositoryRoot | None]) -> None:
    """Print one line per selected root with its full address."""
    console.print("Repositories to be added as the remote origin:")
    for entry in roots:
        root = require_root(entry)
        address = root.address_for(repo_name)
        console.print(f"- {escape(root.name)}({escape(root.type)}): {escape(address)}")
    console.print()


def _log_command(command: GitCommand) -> None:
    console.print(f"Executing: {escape(command.render())}")


def run_session(
    prompter: Prompter,
    runner: CommandRunner,
    *,
    cwd: Path | None = None,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Drive one interactive run and return the exit code.

    Parameters
    ----------
    prompter:
        Source of user answers.
    runner:
        Executes the git commands.
    cwd:
        Directory whose name seeds the default repository name.
        Defaults to the process working directory.
    platform, environ:
        Forwarded to :func:`~git_remote_manager.infra.settings_store.load_settings`.
    """
    cwd = Path.cwd() if cwd is None else cwd

    repo_name = prompt_repo_name(prompter, default_repo_name(cwd))
    console.print(f"Repository name: {escape(repo_name)}")
    console.print()

    settings = load_settings(platform=platform, environ=environ)
    _show_registered_roots(settings)
    indexes = prompt_root_indexes(prompter)
    roots = select_roots(settings.repository_roots, indexes)
    console.print()

    _show_summary(repo_name, roots)
    if not prompt_yes_no(prompter, CONFIRM_QUESTION):
        return exit_codes.SUCCESS

    RemoteService(runner).apply(repo_name, roots, on_execute=_log_command)
    return exit_codes.SUCCESS
