"""Tests for the frozen domain models (core/models.py)."""

from __future__ import annotations

import pytest

from git_remote_manager.core.models import (
    CommandResult,
    GitCommand,
    RepositoryRoot,
    Settings,
)


class TestRepositoryRoot:
    def test_address_for_joins_with_slash(self) -> None:
        root = RepositoryRoot(name="gh", base_path="https://example.com/me", type="Remote")
        assert root.address_for("X.git") == "https://example.com/me/X.git"

    def test_frozen(self) -> None:
        root = RepositoryRoot(name="gh", base_path="/p", type="Remote")
        with pytest.raises(AttributeError):
            root.name = "other"  # type: ignore[misc]


class TestSettings:
    def test_len_and_bool(self) -> None:
        root = RepositoryRoot(name="gh", base_path="/p", type="Remote")
        assert len(Settings(repository_roots=(root, root))) == 2
        assert not Settings(repository_roots=())


class TestGitCommand:
    def test_argv_and_render(self) -> None:
        command = GitCommand("git", ("remote", "add", "origin", "/p/X.git"))
        assert command.argv == ("git", "remote", "add", "origin", "/p/X.git")
        assert command.render() == "git remote add origin /p/X.git"


class TestCommandResult:
    @pytest.mark.parametrize(("code", "ok"), [(0, True), (1, False), (128, False)])
    def test_ok(self, code: int, ok: bool) -> None:
        assert CommandResult(argv=("git",), returncode=code, stdout="", stderr="").ok is ok
