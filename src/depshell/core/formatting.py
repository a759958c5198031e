"""Pure presentation helpers for dependency listings.

Every function in this module is a **pure** transformation with no I/O and
no side effects.  The output adapter decides how a :class:`Color` is
actually rendered (Rich style, plain text, ...).
"""

from __future__ import annotations

from enum import Enum

from depshell.core.models import Dependency, ScopeType


class Color(str, Enum):
    """Display styles understood by output sinks.

    Values are Rich style names so the terminal sink can use them as-is.
    """

    NONE = "none"
    BOLD = "bold"
    BLUE = "blue"
    YELLOW = "yellow"
    GREEN = "green"
    MAGENTA = "magenta"
    BLACK = "bright_black"


SCOPE_COLORS: dict[ScopeType | None, Color] = {
    None: Color.YELLOW,
    ScopeType.PROVIDED: Color.GREEN,
    ScopeType.COMPILE: Color.YELLOW,
    ScopeType.RUNTIME: Color.MAGENTA,
    ScopeType.SYSTEM: Color.BLACK,
    ScopeType.OTHER: Color.BLACK,
    ScopeType.TEST: Color.BLUE,
}

SEPARATOR: str = ":"


def scope_color(scope: ScopeType | None) -> Color:
    """Return the display color for *scope* (``None`` renders like compile)."""
    return SCOPE_COLORS.get(scope, Color.NONE)


def dependency_segments(dependency: Dependency) -> list[tuple[str, Color]]:
    """Split a dependency listing line into styled tokens.

    Field order is always group, artifact, version, packaging, scope.
    Absent version and packaging contribute no token; an absent scope is
    shown as ``compile``.  Callers join tokens with single spaces.
    """
    scope_text = (
        dependency.scope.value if dependency.scope is not None else ScopeType.COMPILE.value
    )
    tokens = [
        (dependency.group_id, Color.BLUE),
        (SEPARATOR, Color.BOLD),
        (dependency.artifact_id, Color.BLUE),
        (SEPARATOR, Color.BOLD),
        (dependency.version or "", Color.NONE),
        (SEPARATOR, Color.BOLD),
        ((dependency.packaging or "").lower(), Color.NONE),
        (SEPARATOR, Color.BOLD),
        (scope_text.lower(), scope_color(dependency.scope)),
    ]
    return [(text, color) for text, color in tokens if text]


def format_dependency_line(dependency: Dependency) -> str:
    """Return the plain-text listing line for *dependency*.

    Example: ``org.jboss.seam.forge : forge-api : 1.0.0 : : compile``
    """
    return " ".join(text for text, _ in dependency_segments(dependency))
