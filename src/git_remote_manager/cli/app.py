"""CLI application entry point and command routing for git-remote-manager.

This module is the **sole error boundary** for the entire application.
It catches :class:`~git_remote_manager.exceptions.GitRemoteManagerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the session,
  core and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from git_remote_manager.cli import exit_codes
from git_remote_manager.cli.console import err_console
from git_remote_manager.exceptions import GitRemoteManagerError
from git_remote_manager.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``git-remote-manager``          — configure origin interactively
    * ``git-remote-manager doctor``   — environment diagnostics
    * ``git-remote-manager --version``
    """
    parser = argparse.ArgumentParser(
        prog="git-remote-manager",
        description=(
            "Register the origin remote of the current repository across "
            "several pre-registered repository roots."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="Run 'doctor' to check git and the settings file.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_session() -> int:
    """Run the interactive origin setup in the working directory."""
    from git_remote_manager.cli.prompts import QuestionaryPrompter
    from git_remote_manager.cli.session import run_session
    from git_remote_manager.infra.git_runner import SubprocessRunner

    return run_session(QuestionaryPrompter(), SubprocessRunner())


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from git_remote_manager.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the git-remote-manager CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_session()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Every failure ends the process with :data:`exit_codes.GENERAL_ERROR`
    after a message on stderr; nothing applied before the failure is
    undone.
    """
    try:
        code = main()
        sys.exit(code)
    except GitRemoteManagerError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.GENERAL_ERROR)
