"""Allow ``python -m git_remote_manager`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m git_remote_manager`` behaves identically to the
``git-remote-manager`` console script.
"""

from __future__ import annotations

from git_remote_manager.cli.app import cli

if __name__ == "__main__":
    cli()
