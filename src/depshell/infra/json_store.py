"""JSON-file backed implementation of :class:`~depshell.core.protocols.DependencyStore`.

This module is the **only** place in the codebase that touches the
project file.  ``OSError`` and JSON decoding errors are caught here and
re-raised as typed :class:`~depshell.exceptions.ProjectStoreError`
subclasses, so nothing raw escapes the infrastructure boundary.

File layout::

    {
      "dependencies": [
        {"groupId": "org.example", "artifactId": "lib", "version": "1.0",
         "scope": "test", "packaging": "jar"}
      ],
      "properties": {"name": "value"}
    }
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from depshell.core.memory_store import InMemoryDependencyStore
from depshell.core.models import Dependency, ScopeType
from depshell.exceptions import (
    DepshellError,
    ProjectFormatError,
    ProjectNotFoundError,
    ProjectStoreError,
)

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_FILE: str = "depshell.json"


# ---------------------------------------------------------------------------
# Entry (de)serialisation (pure)
# ---------------------------------------------------------------------------

def dependency_to_entry(dependency: Dependency) -> dict[str, str]:
    """Convert a :class:`Dependency` to its JSON object, omitting absent keys."""
    entry = {
        "groupId": dependency.group_id,
        "artifactId": dependency.artifact_id,
    }
    if dependency.version is not None:
        entry["version"] = dependency.version
    if dependency.scope is not None:
        entry["scope"] = dependency.scope.value
    if dependency.packaging is not None:
        entry["packaging"] = dependency.packaging
    return entry


def _optional_text(entry: dict[str, Any], key: str) -> str | None:
    """Return the string under *key*; missing, ``null`` or ``""`` means absent."""
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ProjectFormatError(f"Dependency '{key}' must be a string: {entry!r}")
    return value or None


def entry_to_dependency(entry: Any) -> Dependency:
    """Convert one JSON object to a :class:`Dependency`.

    Raises
    ------
    ProjectFormatError
        If the entry is not an object, lacks ids, holds a non-string
        field, or has a bad scope.
    """
    if not isinstance(entry, dict):
        raise ProjectFormatError(f"Dependency entry must be an object, got: {entry!r}")

    group_id = entry.get("groupId")
    artifact_id = entry.get("artifactId")
    if not isinstance(group_id, str) or not group_id:
        raise ProjectFormatError(f"Dependency entry is missing 'groupId': {entry!r}")
    if not isinstance(artifact_id, str) or not artifact_id:
        raise ProjectFormatError(f"Dependency entry is missing 'artifactId': {entry!r}")

    raw_scope = _optional_text(entry, "scope")
    try:
        scope = ScopeType.parse(raw_scope) if raw_scope else None
    except DepshellError as exc:
        raise ProjectFormatError(str(exc), hint=exc.hint) from exc

    return Dependency(
        group_id=group_id,
        artifact_id=artifact_id,
        version=_optional_text(entry, "version"),
        scope=scope,
        packaging=_optional_text(entry, "packaging"),
    )


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class JsonProjectStore(InMemoryDependencyStore):
    """Dependency store persisted to a JSON project descriptor.

    Reads go to the in-memory state loaded at construction; every
    mutation is written back to disk immediately, and a failed write
    leaves the in-memory state as it was before the mutation.

    Usage::

        store = JsonProjectStore.open(Path("depshell.json"), create=True)
        store.set_property("java.version", "17")
    """

    def __init__(
        self,
        path: Path,
        dependencies: list[Dependency] | None = None,
        properties: dict[str, str] | None = None,
    ) -> None:
        super().__init__(dependencies or (), properties)
        self.path: Path = path
        self._batching: bool = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def open(cls, path: Path, *, create: bool = False) -> JsonProjectStore:
        """Load the project at *path*.

        Parameters
        ----------
        path:
            Location of the project file.
        create:
            When ``True`` and *path* does not exist, start an empty
            project and write it out.

        Raises
        ------
        ProjectNotFoundError
            If *path* does not exist and *create* is ``False``.
        ProjectFormatError
            If the file is not a valid project descriptor.
        ProjectStoreError
            If the file cannot be read or written.
        """
        if not path.exists():
            if not create:
                raise ProjectNotFoundError(
                    f"Project file not found: {path}",
                    hint="Run with --init to create an empty project.",
                )
            store = cls(path)
            store.save()
            logger.info("Created empty project at %s", path)
            return store

        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ProjectStoreError(f"Cannot read project file {path}: {exc}") from exc

        try:
            data = json.loads(raw_text) if raw_text.strip() else {}
        except json.JSONDecodeError as exc:
            raise ProjectFormatError(
                f"Project file {path} is not valid JSON: {exc}",
            ) from exc

        dependencies, properties = cls._parse_document(data)
        logger.info(
            "Loaded %d dependencies and %d properties from %s",
            len(dependencies),
            len(properties),
            path,
        )
        return cls(path, dependencies, properties)

    @staticmethod
    def _parse_document(data: Any) -> tuple[list[Dependency], dict[str, str]]:
        """Validate the top-level document and convert its sections."""
        if not isinstance(data, dict):
            raise ProjectFormatError("Project file must contain a JSON object.")

        raw_deps = data.get("dependencies", [])
        if not isinstance(raw_deps, list):
            raise ProjectFormatError("'dependencies' must be a list.")

        raw_props = data.get("properties", {})
        if not isinstance(raw_props, dict):
            raise ProjectFormatError("'properties' must be an object.")

        dependencies = [entry_to_dependency(entry) for entry in raw_deps]
        for name, value in raw_props.items():
            if not isinstance(value, str):
                raise ProjectFormatError(
                    f"Property {name!r} must have a string value, got: {value!r}",
                )
        return dependencies, dict(raw_props)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_document(self) -> dict[str, Any]:
        return {
            "dependencies": [dependency_to_entry(dep) for dep in self.get_dependencies()],
            "properties": self.get_properties(),
        }

    def save(self) -> None:
        """Write the project atomically (temp file in the same dir + replace)."""
        payload = json.dumps(self.to_document(), indent=2) + "\n"
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise ProjectStoreError(f"Cannot write project file {self.path}: {exc}") from exc
        logger.debug("Saved project to %s", self.path)

    # ------------------------------------------------------------------
    # Mutations (persisted)
    # ------------------------------------------------------------------

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Persist the mutations made inside the block with a single save.

        If the block raises or the save fails, the in-memory state is
        restored to what it was on entry and the file is left untouched.
        Nested batches join the outermost one.
        """
        if self._batching:
            yield
            return

        snapshot = (dict(self._dependencies), dict(self._properties))
        self._batching = True
        try:
            yield
            self.save()
        except BaseException:
            self._dependencies, self._properties = snapshot
            logger.debug("Rolled back unsaved changes to %s", self.path)
            raise
        finally:
            self._batching = False

    def add_dependency(self, dependency: Dependency) -> None:
        with self.batch():
            super().add_dependency(dependency)

    def remove_dependency(self, dependency: Dependency) -> Dependency | None:
        if not self.has_dependency(dependency):
            return None
        with self.batch():
            return super().remove_dependency(dependency)

    def set_property(self, name: str, value: str) -> None:
        with self.batch():
            super().set_property(name, value)

    def remove_property(self, name: str) -> str | None:
        if self.get_property(name) is None:
            return None
        with self.batch():
            return super().remove_property(name)
