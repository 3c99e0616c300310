"""Infrastructure layer — external system integration.

This layer wraps all interaction with the environment, the filesystem
and the git executable.  Every raw OS or subprocess exception must be
caught here and re-raised as a
:class:`~git_remote_manager.exceptions.GitRemoteManagerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from git_remote_manager.infra.git_detector import GitStatus, detect_git
from git_remote_manager.infra.git_runner import SubprocessRunner
from git_remote_manager.infra.settings_store import load_settings, settings_path

__all__: list[str] = [
    "GitStatus",
    "SubprocessRunner",
    "detect_git",
    "load_settings",
    "settings_path",
]
