"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, environment or subprocess access.
* No imports from ``cli`` or ``infra``.
"""

from git_remote_manager.core.models import (
    CommandResult,
    GitCommand,
    RepositoryRoot,
    Settings,
)
from git_remote_manager.core.protocols import CommandRunner, Prompter
from git_remote_manager.core.remote_service import (
    RemoteService,
    remote_address,
    require_root,
)

__all__: list[str] = [
    "CommandResult",
    "CommandRunner",
    "GitCommand",
    "Prompter",
    "RemoteService",
    "RepositoryRoot",
    "Settings",
    "remote_address",
    "require_root",
]
