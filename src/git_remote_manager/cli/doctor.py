"""``git-remote-manager doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies git-remote-manager's
requirements: git on PATH and a readable settings file.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Mapping

from rich.markup import escape
from rich.table import Table

from git_remote_manager.cli import exit_codes
from git_remote_manager.cli.console import console
from git_remote_manager.exceptions import GitRemoteManagerError
from git_remote_manager.infra.git_detector import GitStatus, detect_git
from git_remote_manager.infra.settings_store import read_settings, settings_path
from git_remote_manager.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _git_check(status_obj: GitStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the git row."""
    if status_obj.found:
        return "git", str(status_obj.path), OK
    return "git", "not found", FAIL


def _settings_check(
    platform_name: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, str, str]:
    """Return (label, value, status) for the settings-file row."""
    try:
        path = settings_path(platform=platform_name, environ=environ)
        settings = read_settings(path)
    except GitRemoteManagerError as exc:
        return "Settings", str(exc), FAIL
    if not settings:
        return "Settings", f"{path} (no repository roots)", WARN
    return "Settings", f"{path} ({len(settings)} roots)", OK


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(
    *,
    platform_name: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    git_status = detect_git()
    checks = [
        ("git-remote-manager", __version__, OK),
        _python_version_check(),
        _git_check(git_status),
        _settings_check(platform_name, environ),
        _os_check(),
    ]

    table = Table(
        title="git-remote-manager doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()

    if not git_status.found:
        console.print("[yellow]git is not installed.[/yellow]")
        console.print("Install using one of the following commands:\n")
        for cmd in git_status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if any(status.startswith("[red]") for _, _, status in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
