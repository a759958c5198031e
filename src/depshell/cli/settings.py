"""Runtime settings resolution for the CLI.

Precedence for every setting is: command-line option, then environment
variable, then built-in default.

* project file: ``--project`` / ``DEPSHELL_PROJECT`` / ``depshell.json``
* assume yes: ``--yes`` / ``DEPSHELL_ASSUME_YES`` / off
* log level: ``-v`` / ``DEPSHELL_LOG_LEVEL`` / ``WARNING``
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from depshell.infra.json_store import DEFAULT_PROJECT_FILE

ENV_PROJECT: str = "DEPSHELL_PROJECT"
ENV_ASSUME_YES: str = "DEPSHELL_ASSUME_YES"
ENV_LOG_LEVEL: str = "DEPSHELL_LOG_LEVEL"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for one CLI invocation."""

    project_path: Path
    assume_yes: bool = False
    create_project: bool = False
    log_level: int = logging.WARNING


def _env_bool(environ: Mapping[str, str], key: str) -> bool:
    return environ.get(key, "").strip().lower() in _TRUTHY


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def _env_log_level(environ: Mapping[str, str]) -> int | None:
    """Parse ``DEPSHELL_LOG_LEVEL`` as a level name; ignore unknown names."""
    raw = environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def resolve_settings(
    *,
    project: str | None = None,
    assume_yes: bool = False,
    create_project: bool = False,
    verbosity: int = 0,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Combine parsed options with the environment into :class:`Settings`."""
    env = os.environ if environ is None else environ

    raw_project = project or env.get(ENV_PROJECT) or DEFAULT_PROJECT_FILE

    if verbosity:
        log_level = _level_from_verbosity(verbosity)
    else:
        env_level = _env_log_level(env)
        log_level = logging.WARNING if env_level is None else env_level

    return Settings(
        project_path=Path(raw_project).expanduser(),
        assume_yes=assume_yes or _env_bool(env, ENV_ASSUME_YES),
        create_project=create_project,
        log_level=log_level,
    )
