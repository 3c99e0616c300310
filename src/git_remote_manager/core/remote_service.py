"""Core remote service — plans and applies the ``origin`` configuration.

Depends on a :class:`~git_remote_manager.core.protocols.CommandRunner`
injected at construction time, keeping the core free of any
subprocess imports.

Guarantees
----------
* Commands run strictly in order: ``remote add`` first, then one
  ``remote set-url --add --push`` per selected root, the first included.
* The first failing command aborts the rest.  Nothing is rolled back.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from git_remote_manager.core.models import GitCommand, RepositoryRoot
from git_remote_manager.core.protocols import CommandRunner
from git_remote_manager.exceptions import UnknownRepositoryRootError

GIT_PROGRAM: str = "git"

REMOTE_NAME: str = "origin"


def require_root(root: RepositoryRoot | None) -> RepositoryRoot:
    """Return *root*, rejecting the absent entry of an out-of-range index.

    Raises
    ------
    UnknownRepositoryRootError
        If *root* is ``None`` (an out-of-range selection).
    """
    if root is None:
        raise UnknownRepositoryRootError(
            "Selected index does not refer to a registered repository.",
            hint="Use one of the indexes listed under 'Registered repositories'.",
        )
    return root


def remote_address(root: RepositoryRoot | None, repo_name: str) -> str:
    """Return ``basePath/repo_name`` for *root*."""
    return require_root(root).address_for(repo_name)


class RemoteService:
    """Builds and executes the git commands that configure ``origin``.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    program:
        Name of the version-control executable looked up on PATH.
    """

    def __init__(self, runner: CommandRunner, *, program: str = GIT_PROGRAM) -> None:
        self._runner: CommandRunner = runner
        self._program: str = program

    # ------------------------------------------------------------------
    # Planning (pure)
    # ------------------------------------------------------------------

    def build_commands(
        self,
        repo_name: str,
        roots: Sequence[RepositoryRoot | None],
    ) -> tuple[GitCommand, ...]:
        """Return the ordered commands for *roots*.

        Raises
        ------
        UnknownRepositoryRootError
            If *roots* is empty or contains an absent entry.
        """
        if not roots:
            raise UnknownRepositoryRootError("No repositories were selected.")

        fetch_address = remote_address(roots[0], repo_name)
        commands = [
            GitCommand(self._program, ("remote", "add", REMOTE_NAME, fetch_address)),
        ]
        for root in roots:
            commands.append(
                GitCommand(
                    self._program,
                    (
                        "remote",
                        "set-url",
                        "--add",
                        "--push",
                        REMOTE_NAME,
                        remote_address(root, repo_name),
                    ),
                )
            )
        return tuple(commands)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def apply(
        self,
        repo_name: str,
        roots: Sequence[RepositoryRoot | None],
        *,
        on_execute: Callable[[GitCommand], None] | None = None,
    ) -> None:
        """Run every planned command in order.

        *on_execute* is invoked with each command right before it runs.
        Errors raised by the runner propagate unchanged.
        """
        for command in self.build_commands(repo_name, roots):
            if on_execute is not None:
                on_execute(command)
            self._runner.run(command.program, command.args)
