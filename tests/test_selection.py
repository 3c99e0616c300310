"""Tests for repository-name derivation and root selection (core/selection.py).

Pure functions only — no prompts, no filesystem.
"""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from git_remote_manager.core.models import RepositoryRoot
from git_remote_manager.core.selection import (
    default_repo_name,
    parse_index_list,
    parse_leading_int,
    resolve_repo_name,
    select_roots,
)


def _roots(count: int = 3) -> list[RepositoryRoot]:
    return [RepositoryRoot(name=f"r{i}", base_path=f"/base{i}", type="Remote") for i in range(count)]


# ---------------------------------------------------------------------------
# Repository name
# ---------------------------------------------------------------------------

class TestDefaultRepoName:
    def test_appends_git_suffix(self) -> None:
        assert default_repo_name(PurePosixPath("/home/me/project")) == "project.git"

    def test_windows_path(self) -> None:
        assert default_repo_name(PureWindowsPath(r"C:\src\tool")) == "tool.git"

    def test_filesystem_root(self) -> None:
        assert default_repo_name(PurePosixPath("/")) == ".git"


class TestResolveRepoName:
    def test_empty_answer_uses_default(self) -> None:
        assert resolve_repo_name("", "project.git") == "project.git"

    def test_answer_overrides_verbatim(self) -> None:
        assert resolve_repo_name("  other  ", "project.git") == "  other  "


# ---------------------------------------------------------------------------
# Integer parsing
# ---------------------------------------------------------------------------

class TestParseLeadingInt:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("3", 3),
            (" 12 ", 12),
            ("3x", 3),
            ("+4", 4),
            ("-1", -1),
            ("007", 7),
            ("0x1f", 31),
            ("-0x10", -16),
            ("2.9", 2),
        ],
    )
    def test_parses_leading_integer(self, token: str, expected: int) -> None:
        assert parse_leading_int(token) == expected

    @pytest.mark.parametrize("token", ["", "   ", "x3", "-", "0x", "0xz", "abc"])
    def test_rejects_non_numeric(self, token: str) -> None:
        assert parse_leading_int(token) is None


class TestParseIndexList:
    def test_preserves_order_and_spacing(self) -> None:
        assert parse_index_list("1, 0,2") == [1, 0, 2]

    def test_preserves_repeats(self) -> None:
        assert parse_index_list("0,0") == [0, 0]

    def test_single_index(self) -> None:
        assert parse_index_list("2") == [2]

    def test_one_bad_token_rejects_batch(self) -> None:
        assert parse_index_list("0,a,1") is None

    def test_empty_answer_is_rejected(self) -> None:
        assert parse_index_list("") is None

    def test_trailing_comma_is_rejected(self) -> None:
        assert parse_index_list("0,") is None


# ---------------------------------------------------------------------------
# Root selection
# ---------------------------------------------------------------------------

class TestSelectRoots:
    def test_order_follows_indexes(self) -> None:
        roots = _roots()
        assert select_roots(roots, [1, 0, 2]) == [roots[1], roots[0], roots[2]]

    def test_repeats_are_kept(self) -> None:
        roots = _roots()
        assert select_roots(roots, [2, 2]) == [roots[2], roots[2]]

    def test_out_of_range_yields_none(self) -> None:
        roots = _roots()
        assert select_roots(roots, [0, 5]) == [roots[0], None]

    def test_negative_index_does_not_wrap(self) -> None:
        assert select_roots(_roots(), [-1]) == [None]
