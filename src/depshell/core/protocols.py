"""Protocols (interfaces) consumed by the core layer.

These define the contracts that store, prompt and output adapters must
satisfy.  Core code depends ONLY on these protocols, never on concrete
implementations, so the command set can be driven by an in-memory
store and scripted prompts in tests and by the JSON project store and
questionary at the terminal.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from depshell.core.formatting import Color
from depshell.core.models import Dependency


class DependencyStore(Protocol):
    """Contract for the project's dependency and property storage.

    Dependencies are looked up by key (group id and artifact id); the
    version, scope and packaging of the argument are ignored for lookups.
    Iteration order of :meth:`get_dependencies` and :meth:`get_properties`
    is insertion order.
    """

    def has_dependency(self, dependency: Dependency) -> bool:
        ...  # pragma: no cover

    def get_dependency(self, dependency: Dependency) -> Dependency | None:
        """Return the stored declaration with the same key, if any."""
        ...  # pragma: no cover

    def add_dependency(self, dependency: Dependency) -> None:
        ...  # pragma: no cover

    def remove_dependency(self, dependency: Dependency) -> Dependency | None:
        """Remove and return the stored declaration with the same key."""
        ...  # pragma: no cover

    def get_dependencies(self) -> list[Dependency]:
        ...  # pragma: no cover

    def batch(self) -> AbstractContextManager[None]:
        """Apply the mutations made inside the block as one unit."""
        ...  # pragma: no cover

    def get_properties(self) -> dict[str, str]:
        ...  # pragma: no cover

    def get_property(self, name: str) -> str | None:
        ...  # pragma: no cover

    def set_property(self, name: str, value: str) -> None:
        ...  # pragma: no cover

    def remove_property(self, name: str) -> str | None:
        """Remove *name* and return its previous value, if any."""
        ...  # pragma: no cover


class ConfirmationPrompter(Protocol):
    """Yes/no decision strategy: ``(message, default) -> bool``.

    Any plain function with this signature satisfies the protocol.
    """

    def __call__(self, message: str, default: bool) -> bool:
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Line-oriented output with optional per-fragment styling.

    :meth:`print` writes a fragment without ending the line;
    :meth:`println` writes a fragment and ends the line.
    Text is always literal; sinks must not interpret markup in it.
    """

    def print(self, text: str, style: Color | None = None) -> None:
        ...  # pragma: no cover

    def println(self, text: str = "", style: Color | None = None) -> None:
        ...  # pragma: no cover
