"""Infrastructure: git detection and platform guidance.

This module is responsible for locating git on the system PATH and
providing platform-specific installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from git_remote_manager.core.remote_service import GIT_PROGRAM


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GitStatus:
    """Result of a git detection probe.

    Attributes
    ----------
    found : bool
        Whether git was located on PATH.
    path : Path | None
        Absolute path to the git binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing git on the current
        platform.  Empty when git is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_git(program: str = GIT_PROGRAM) -> GitStatus:
    """Probe the system for *program*.

    Returns a :class:`GitStatus` regardless of whether git is present —
    the caller decides whether to abort or merely warn.
    """
    result = shutil.which(program)

    if result is not None:
        return GitStatus(found=True, path=Path(result).resolve(), install_commands=())

    return GitStatus(found=False, path=None, install_commands=platform_install_commands())


def install_hint() -> str:
    """Render the platform install commands as a multi-line hint."""
    lines = ["Install git using one of:"]
    lines.extend(f"  {cmd}" for cmd in platform_install_commands())
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Git.Git",
            "choco install git",
        )
    if system == "linux":
        return (
            "sudo apt install git",
            "sudo dnf install git",
            "sudo pacman -S git",
        )
    if system == "darwin":
        return ("brew install git", "xcode-select --install")
    return ("Please install git from https://git-scm.com/downloads",)
