"""Dependency and property commands.

:class:`DependencyCommands` is the façade the CLI layer drives.  It
depends on a :class:`~depshell.core.protocols.DependencyStore`, a
:class:`~depshell.core.protocols.ConfirmationPrompter` and an
:class:`~depshell.core.protocols.OutputSink`, all injected at
construction time.

Guarantees
----------
* No ``print()``; all output goes through the injected sink.
* Removing something that is not there is an informational message,
  never an error.
* Store errors propagate unchanged and halt the command.
"""

from __future__ import annotations

import logging

from depshell.core.formatting import Color, dependency_segments, format_dependency_line
from depshell.core.models import Dependency
from depshell.core.protocols import ConfirmationPrompter, DependencyStore, OutputSink

logger = logging.getLogger(__name__)


class DependencyCommands:
    """Add, remove and list dependencies and build properties.

    Parameters
    ----------
    store:
        The project's dependency store.
    prompter:
        Yes/no strategy consulted before replacing or updating.
    out:
        Destination for user-facing messages and listings.
    """

    def __init__(
        self,
        store: DependencyStore,
        prompter: ConfirmationPrompter,
        out: OutputSink,
    ) -> None:
        self._store: DependencyStore = store
        self._prompt: ConfirmationPrompter = prompter
        self._out: OutputSink = out

    # ------------------------------------------------------------------
    # Dependencies
    # ------------------------------------------------------------------

    def add_dependency(self, gav: Dependency) -> bool:
        """Add *gav*, asking before replacing an existing declaration.

        The replace prompt defaults to "no".  Declining leaves the store
        untouched and prints nothing.  A confirmed replace is applied as
        a single store batch.

        Returns
        -------
        bool
            ``True`` when the store was changed.
        """
        existing = self._store.get_dependency(gav)
        if existing is None:
            self._store.add_dependency(gav)
            logger.info("Added dependency %s", gav)
            self._out.println(f"Added dependency [{gav}]")
            return True

        question = f"Dependency already exists [{existing}], replace with [{gav}]?"
        if not self._prompt(question, False):
            logger.debug("Kept existing dependency %s", existing)
            return False

        with self._store.batch():
            self._store.remove_dependency(existing)
            self._store.add_dependency(gav)
        logger.info("Replaced dependency %s with %s", existing, gav)
        self._out.println(f"Replaced dependency [{existing}] with [{gav}]")
        return True

    def remove_dependency(self, gav: Dependency) -> Dependency | None:
        """Remove the declaration sharing *gav*'s key, if present."""
        if not self._store.has_dependency(gav):
            self._out.println("Dependency not found in project... ")
            return None

        removed = self._store.remove_dependency(gav)
        logger.info("Removed dependency %s", removed)
        self._out.println(f"Removed dependency [{gav}]")
        return removed

    def list_dependencies(self) -> list[str]:
        """Print one styled line per dependency and return the plain lines."""
        lines: list[str] = []
        for dependency in self._store.get_dependencies():
            self._print_dependency(dependency)
            lines.append(format_dependency_line(dependency))
        return lines

    def _print_dependency(self, dependency: Dependency) -> None:
        for index, (text, color) in enumerate(dependency_segments(dependency)):
            if index:
                self._out.print(" ")
            self._out.print(text, color)
        self._out.println()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def set_property(self, name: str, value: str) -> bool:
        """Set *name* to *value*, asking before overwriting.

        The update prompt defaults to "yes".  Declining keeps the old
        value.

        Returns
        -------
        bool
            ``True`` when the store was changed.
        """
        current = self._store.get_property(name)
        if current is None:
            self._store.set_property(name, value)
            logger.info("Set property %s", name)
            self._out.println(f"Set property [{name}={value}]")
            return True

        question = f"Update property [{name}={current}] to new value [{value}]"
        if not self._prompt(question, True):
            self._out.println(f"Property [{name}] unchanged")
            return False

        self._store.set_property(name, value)
        logger.info("Updated property %s", name)
        self._out.println("Updated...")
        return True

    def remove_property(self, name: str) -> str | None:
        """Remove *name* and return the value it held, if it existed."""
        if name not in self._store.get_properties():
            self._out.println(f"No such property [{name}]")
            return None

        value = self._store.remove_property(name)
        logger.info("Removed property %s", name)
        self._out.println(f"Removed property [{name}={value}]")
        return value

    def list_properties(self) -> dict[str, str]:
        """Print ``name=value`` lines with the value highlighted."""
        properties = self._store.get_properties()
        for name, value in properties.items():
            self._out.print(f"{name}=")
            self._out.println(value, Color.BLUE)
        return properties
