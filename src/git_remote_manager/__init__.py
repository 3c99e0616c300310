"""git-remote-manager — register a repository's origin across mirror roots.

Prompts for a repository name and a list of pre-registered repository
roots, then configures ``origin`` with one fetch URL and one push URL
per selected root.
"""

from git_remote_manager.version import __version__

__all__: list[str] = ["__version__"]
