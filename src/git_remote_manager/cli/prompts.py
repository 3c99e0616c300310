"""Interactive prompts for the CLI layer.

This module is responsible for:

* Reading single lines of input through questionary.
* The read-validate-loop for every question the session asks.

Loops retry without limit; a cancelled prompt raises
:class:`~git_remote_manager.exceptions.PromptCancelledError`.
"""

from __future__ import annotations

from typing import Any

from git_remote_manager.cli.console import console, err_console
from git_remote_manager.core.protocols import Prompter
from git_remote_manager.core.selection import parse_index_list, resolve_repo_name
from git_remote_manager.exceptions import EnvironmentError, PromptCancelledError

INDEX_PROMPT: str = (
    "The first choice will be used as the fetch repository. (Comma separated): "
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by ``questionary.text``."""

    def ask(self, message: str) -> str:
        questionary = _import_questionary()
        try:
            answer: str | None = questionary.text(message, qmark="").ask()
        except EOFError as exc:
            raise PromptCancelledError("Prompt cancelled.") from exc
        if answer is None:
            raise PromptCancelledError("Prompt cancelled.")
        return answer


# ---------------------------------------------------------------------------
# Question loops
# ---------------------------------------------------------------------------

def prompt_repo_name(prompter: Prompter, default: str) -> str:
    """Ask for the repository name, offering *default* inline."""
    answer = prompter.ask(f"Enter the name of the repository [{default}]: ")
    return resolve_repo_name(answer, default)


def prompt_root_indexes(prompter: Prompter) -> list[int]:
    """Ask for comma-separated indexes until every token parses."""
    while True:
        console.print("Enter indexes of repositories you want to use.")
        indexes = parse_index_list(prompter.ask(INDEX_PROMPT))
        if indexes is not None:
            return indexes
        err_console.print("Enter numbers")


def prompt_yes_no(prompter: Prompter, message: str) -> bool:
    """Ask *message* until the answer is exactly ``y`` or ``n``."""
    while True:
        answer = prompter.ask(f"{message} (y/n): ")
        if answer == "y":
            return True
        if answer == "n":
            return False
        err_console.print("Type 'y' or 'n'")
