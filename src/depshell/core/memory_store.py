"""In-memory implementation of :class:`~depshell.core.protocols.DependencyStore`.

Dicts preserve insertion order, which gives the listing order the
commands rely on.  The JSON project store layers persistence on top of
this class.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager

from depshell.core.models import Dependency

logger = logging.getLogger(__name__)


class InMemoryDependencyStore:
    """Ordered, dict-backed dependency and property storage.

    At most one dependency is held per ``(group_id, artifact_id)`` key;
    adding a dependency whose key is already present overwrites the
    stored declaration in place.
    """

    def __init__(
        self,
        dependencies: Iterable[Dependency] = (),
        properties: Mapping[str, str] | None = None,
    ) -> None:
        self._dependencies: dict[tuple[str, str], Dependency] = {}
        self._properties: dict[str, str] = dict(properties or {})
        for dependency in dependencies:
            self._dependencies[dependency.key] = dependency

    # ------------------------------------------------------------------
    # Dependencies
    # ------------------------------------------------------------------

    def has_dependency(self, dependency: Dependency) -> bool:
        return dependency.key in self._dependencies

    def get_dependency(self, dependency: Dependency) -> Dependency | None:
        return self._dependencies.get(dependency.key)

    def add_dependency(self, dependency: Dependency) -> None:
        logger.debug("Storing dependency %s", dependency)
        self._dependencies[dependency.key] = dependency

    def remove_dependency(self, dependency: Dependency) -> Dependency | None:
        removed = self._dependencies.pop(dependency.key, None)
        if removed is not None:
            logger.debug("Dropped dependency %s", removed)
        return removed

    def get_dependencies(self) -> list[Dependency]:
        return list(self._dependencies.values())

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Group several mutations; a no-op for the in-memory store."""
        yield

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def get_properties(self) -> dict[str, str]:
        return dict(self._properties)

    def get_property(self, name: str) -> str | None:
        return self._properties.get(name)

    def set_property(self, name: str, value: str) -> None:
        logger.debug("Storing property %s=%s", name, value)
        self._properties[name] = value

    def remove_property(self, name: str) -> str | None:
        return self._properties.pop(name, None)
