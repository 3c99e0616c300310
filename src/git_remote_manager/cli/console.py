"""Rich consoles shared by the CLI layer.

``console`` carries the session transcript on stdout; ``err_console``
carries errors and re-prompt messages on stderr.  Soft wrapping keeps
long repository addresses on one line.
"""

from __future__ import annotations

from rich.console import Console

console = Console(soft_wrap=True, highlight=False, emoji=False)

err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)
