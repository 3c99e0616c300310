"""Infrastructure: settings file discovery and loading.

The settings file is read-only input: it is resolved from the home
directory, parsed once per run and never written back.

Rules
-----
* Platform and environment are injectable for tests.
* No ``print()`` — callers handle user-facing output.
* ``OSError`` and ``json.JSONDecodeError`` never escape this module.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from git_remote_manager.core.models import RepositoryRoot, Settings
from git_remote_manager.exceptions import ConfigurationError, SettingsLoadError

SETTINGS_FILE_NAME: str = ".git-remote-manager.json"

WINDOWS_PLATFORM: str = "win32"

_ROOT_FIELDS: tuple[str, ...] = ("name", "basePath", "type")

_EXAMPLE_SETTINGS = (
    '{"repositoryRoots": [{"name": "github", '
    '"basePath": "git@github.com:me", "type": "Remote"}]}'
)


# ---------------------------------------------------------------------------
# Home directory resolution
# ---------------------------------------------------------------------------

def home_env_var(platform: str | None = None) -> str:
    """Return the name of the variable holding the home directory."""
    platform = sys.platform if platform is None else platform
    return "USERPROFILE" if platform == WINDOWS_PLATFORM else "HOME"


def resolve_home_directory(
    *,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the home directory named by the platform's variable.

    Raises
    ------
    ConfigurationError
        If the variable is unset.
    """
    environ = os.environ if environ is None else environ
    var = home_env_var(platform)
    home = environ.get(var)
    if home is None:
        raise ConfigurationError(
            f"Could not retrieve {var} environment variable",
            hint=f"Set {var} to the directory containing {SETTINGS_FILE_NAME}.",
        )
    return Path(home)


def settings_path(
    *,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return ``<home>/.git-remote-manager.json``."""
    return resolve_home_directory(platform=platform, environ=environ) / SETTINGS_FILE_NAME


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_settings(data: Any) -> Settings:
    """Convert decoded JSON into :class:`Settings`.

    Only the presence and string type of the required fields are
    checked; values are carried verbatim and ``type`` is not validated.

    Raises
    ------
    SettingsLoadError
        If ``repositoryRoots`` or an entry's fields are missing, or a
        field is not a string.
    """
    if not isinstance(data, dict) or not isinstance(data.get("repositoryRoots"), list):
        raise SettingsLoadError(
            "Settings must be an object with a 'repositoryRoots' list.",
            hint=f"Example: {_EXAMPLE_SETTINGS}",
        )

    roots: list[RepositoryRoot] = []
    for position, entry in enumerate(data["repositoryRoots"]):
        if not isinstance(entry, dict):
            raise SettingsLoadError(f"repositoryRoots[{position}] is not an object.")
        missing = [key for key in _ROOT_FIELDS if key not in entry]
        if missing:
            raise SettingsLoadError(
                f"repositoryRoots[{position}] is missing: {', '.join(missing)}",
            )
        not_strings = [key for key in _ROOT_FIELDS if not isinstance(entry[key], str)]
        if not_strings:
            raise SettingsLoadError(
                f"repositoryRoots[{position}] must have string values for: "
                f"{', '.join(not_strings)}",
            )
        roots.append(
            RepositoryRoot(
                name=entry["name"],
                base_path=entry["basePath"],
                type=entry["type"],
            )
        )
    return Settings(repository_roots=tuple(roots))


def read_settings(path: Path) -> Settings:
    """Read and parse the settings file at *path*.

    Raises
    ------
    SettingsLoadError
        If the file cannot be read, is not UTF-8 or is not valid
        settings JSON.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsLoadError(
            f"Could not read settings file {path}: {exc.strerror or exc}",
            hint=f"Create {path} containing e.g. {_EXAMPLE_SETTINGS}",
        ) from exc
    except UnicodeDecodeError as exc:
        raise SettingsLoadError(
            f"Settings file {path} is not valid UTF-8: {exc.reason}",
            hint="Save the file with UTF-8 encoding.",
        ) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SettingsLoadError(
            f"Settings file {path} is not valid JSON: {exc}",
        ) from exc

    return parse_settings(data)


def load_settings(
    *,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Locate, read and parse the settings file.

    Raises
    ------
    ConfigurationError
        If the home-directory variable is unset.
    SettingsLoadError
        If the file cannot be read or is not valid settings JSON.
    """
    return read_settings(settings_path(platform=platform, environ=environ))
