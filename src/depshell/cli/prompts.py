"""Interactive prompts for the CLI layer.

This module is responsible for:

* Yes/no confirmation before replacing a dependency or updating a
  property (the :class:`~depshell.core.protocols.ConfirmationPrompter`
  strategy handed to the command set).
* Asking for required options that were omitted on the command line,
  with property-name completion for ``--name``.

questionary is imported lazily so that non-interactive runs never need
a terminal.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from depshell.core.models import DEPENDENCY_ID_FORMAT, Dependency, parse_dependency_id
from depshell.core.protocols import ConfirmationPrompter
from depshell.exceptions import DepshellError, EnvironmentError, PromptCancelledError

logger = logging.getLogger(__name__)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def stdin_is_interactive() -> bool:
    """Return ``True`` when stdin is attached to a terminal."""
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _answer_or_cancel(answer: Any) -> Any:
    # questionary returns None on Ctrl+C / Esc.
    if answer is None:
        raise PromptCancelledError(
            "Prompt cancelled.",
            hint="Pass the value on the command line to skip the prompt.",
        )
    return answer


# ---------------------------------------------------------------------------
# Confirmation strategies
# ---------------------------------------------------------------------------

def questionary_confirm(message: str, default: bool) -> bool:
    """Ask a yes/no question on the terminal."""
    questionary = _import_questionary()
    answer = questionary.confirm(message, default=default).ask()
    return bool(_answer_or_cancel(answer))


def always_yes(message: str, default: bool) -> bool:
    logger.info("%s -> yes (--yes)", message)
    return True


def use_default(message: str, default: bool) -> bool:
    logger.info("%s -> %s (non-interactive default)", message, "yes" if default else "no")
    return default


def make_prompter(
    *,
    assume_yes: bool,
    interactive: bool | None = None,
) -> ConfirmationPrompter:
    """Pick the confirmation strategy for this invocation.

    ``--yes`` wins; otherwise a terminal gets a real prompt and anything
    else falls back to each question's default answer.
    """
    if assume_yes:
        return always_yes
    if interactive is None:
        interactive = stdin_is_interactive()
    return questionary_confirm if interactive else use_default


# ---------------------------------------------------------------------------
# Missing required options
# ---------------------------------------------------------------------------

def _validate_dependency_id(text: str) -> bool | str:
    """questionary validator: ``True`` or an error message."""
    try:
        parse_dependency_id(text)
    except DepshellError as exc:
        return str(exc)
    return True


def ask_dependency_id(message: str = "Dependency identifier") -> Dependency:
    """Ask for a dependency identifier until it parses."""
    questionary = _import_questionary()
    answer = questionary.text(
        f"{message} [{DEPENDENCY_ID_FORMAT}]:",
        validate=_validate_dependency_id,
    ).ask()
    return parse_dependency_id(_answer_or_cancel(answer))


def ask_text(message: str) -> str:
    """Ask for a non-empty free-text value."""
    questionary = _import_questionary()
    answer = questionary.text(
        f"{message}:",
        validate=lambda text: bool(text.strip()) or "A value is required.",
    ).ask()
    return str(_answer_or_cancel(answer))


def ask_property_name(
    candidates: Sequence[str],
    message: str = "Property name",
) -> str:
    """Ask for a property name, completing from *candidates*."""
    questionary = _import_questionary()
    answer = questionary.autocomplete(
        f"{message}:",
        choices=list(candidates),
        validate=lambda text: bool(text.strip()) or "A property name is required.",
    ).ask()
    return str(_answer_or_cancel(answer)).strip()
