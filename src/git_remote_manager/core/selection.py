"""Repository-name derivation and root selection.

Pure transforms only: the interactive loops that feed these functions
live in :mod:`git_remote_manager.cli.prompts`.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import PurePath

from git_remote_manager.core.models import RepositoryRoot

REPO_NAME_SUFFIX: str = ".git"

INDEX_SEPARATOR: str = ","

_HEX_PREFIX = re.compile(r"([+-]?)0[xX]")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DECIMAL_PREFIX = re.compile(r"[+-]?[0-9]+")


def default_repo_name(cwd: PurePath) -> str:
    """Return the final segment of *cwd* plus ``.git``."""
    return cwd.name + REPO_NAME_SUFFIX


def resolve_repo_name(answer: str, default: str) -> str:
    """Return *default* for an empty answer, else *answer* verbatim."""
    return default if answer == "" else answer


def parse_leading_int(token: str) -> int | None:
    """Parse the leading integer of *token*, ignoring trailing junk.

    ``"3x"`` gives ``3``, ``"0x1f"`` gives ``31`` and ``"x3"`` gives
    ``None``.  Surrounding whitespace is ignored.
    """
    text = token.strip()

    hex_match = _HEX_PREFIX.match(text)
    if hex_match is not None:
        digits = _HEX_DIGITS.match(text, hex_match.end())
        if digits is None:
            return None
        value = int(digits.group(), 16)
        return -value if hex_match.group(1) == "-" else value

    match = _DECIMAL_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group())


def parse_index_list(answer: str) -> list[int] | None:
    """Parse a comma-separated index list.

    Returns ``None`` when any token fails to parse; the whole batch is
    then rejected.  Order and repeats are preserved.
    """
    indexes: list[int] = []
    for token in answer.split(INDEX_SEPARATOR):
        value = parse_leading_int(token)
        if value is None:
            return None
        indexes.append(value)
    return indexes


def select_roots(
    roots: Sequence[RepositoryRoot],
    indexes: Sequence[int],
) -> list[RepositoryRoot | None]:
    """Map *indexes* onto *roots* in the order given.

    Bounds are not checked here: an index outside ``[0, len(roots))``
    yields ``None`` so the failure surfaces where the entry is used.
    Negative indexes never wrap around.
    """
    return [roots[i] if 0 <= i < len(roots) else None for i in indexes]
