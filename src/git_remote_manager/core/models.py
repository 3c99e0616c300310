"""Domain models for git-remote-manager.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derivations.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass

ADDRESS_SEPARATOR: str = "/"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RepositoryRoot:
    """A named base location under which repositories live."""

    name: str
    """Human-readable label.  Duplicates are allowed."""

    base_path: str
    """URL or filesystem prefix joined with the repository name."""

    type: str
    """``Remote``, ``LocalBare`` or ``LocalNonBare``.  Shown, never acted upon."""

    def address_for(self, repo_name: str) -> str:
        """Return the full repository address under this root."""
        return f"{self.base_path}{ADDRESS_SEPARATOR}{repo_name}"


@dataclass(frozen=True, slots=True)
class Settings:
    """The full configuration loaded once per run.

    Order of :attr:`repository_roots` defines the indexes shown to and
    typed by the user.
    """

    repository_roots: tuple[RepositoryRoot, ...]

    def __len__(self) -> int:
        return len(self.repository_roots)

    def __bool__(self) -> bool:
        return len(self.repository_roots) > 0


# ---------------------------------------------------------------------------
# External commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GitCommand:
    """One planned invocation of the version-control binary."""

    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> tuple[str, ...]:
        return (self.program, *self.args)

    def render(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result envelope for a finished external command."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0
