"""Domain models for depshell.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access and identifier rendering.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from depshell.exceptions import InvalidDependencyIdError

DEPENDENCY_ID_FORMAT: str = "groupId:artifactId[:version[:scope[:packaging]]]"
"""Human-readable shape of a dependency identifier, used in help and hints."""


# ---------------------------------------------------------------------------
# Scope
# ---------------------------------------------------------------------------

class ScopeType(str, Enum):
    """Classpath visibility category of a dependency."""

    COMPILE = "compile"
    PROVIDED = "provided"
    RUNTIME = "runtime"
    TEST = "test"
    SYSTEM = "system"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> ScopeType:
        """Return the scope named by *raw*, ignoring case.

        Raises
        ------
        InvalidDependencyIdError
            If *raw* does not name a known scope.
        """
        normalized = raw.strip().lower()
        for scope in cls:
            if scope.value == normalized:
                return scope
        valid = ", ".join(scope.value for scope in cls)
        raise InvalidDependencyIdError(
            f"Unknown dependency scope: {raw!r}",
            hint=f"Valid scopes are: {valid}",
        )


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dependency:
    """A single dependency declaration.

    Identity is the ``(group_id, artifact_id)`` pair; two declarations
    that differ only in version, scope or packaging describe the same
    dependency as far as the store is concerned.
    """

    group_id: str
    """Maven-style group identifier (e.g. ``org.jboss.seam.forge``)."""

    artifact_id: str
    """Artifact identifier within the group (e.g. ``forge-api``)."""

    version: str | None = None
    """Version string, or ``None`` when unspecified."""

    scope: ScopeType | None = None
    """Declared scope, or ``None`` (displayed as ``compile``)."""

    packaging: str | None = None
    """Packaging type (e.g. ``jar``, ``pom``), or ``None``."""

    @property
    def key(self) -> tuple[str, str]:
        return (self.group_id, self.artifact_id)

    def same_as(self, other: Dependency) -> bool:
        """Return ``True`` when *other* declares the same artifact."""
        return self.key == other.key

    def __str__(self) -> str:
        segments = [
            self.group_id,
            self.artifact_id,
            self.version or "",
            self.scope.value if self.scope is not None else "",
            self.packaging or "",
        ]
        while len(segments) > 2 and not segments[-1]:
            segments.pop()
        return ":".join(segments)


# ---------------------------------------------------------------------------
# Identifier parsing
# ---------------------------------------------------------------------------

def parse_dependency_id(text: str) -> Dependency:
    """Parse ``groupId:artifactId[:version[:scope[:packaging]]]``.

    Empty optional segments are treated as absent, so ``g:a::test``
    declares a test-scoped dependency with no version.

    Raises
    ------
    InvalidDependencyIdError
        If the identifier has fewer than two or more than five segments,
        an empty group or artifact id, or an unknown scope.
    """
    stripped = text.strip()
    segments = [segment.strip() for segment in stripped.split(":")]

    if len(segments) < 2 or len(segments) > 5:
        raise InvalidDependencyIdError(
            f"Invalid dependency identifier: {stripped!r}",
            hint=f"Expected {DEPENDENCY_ID_FORMAT}",
        )

    segments.extend([""] * (5 - len(segments)))
    group_id, artifact_id, version, scope, packaging = segments

    if not group_id or not artifact_id:
        raise InvalidDependencyIdError(
            f"Invalid dependency identifier: {stripped!r}",
            hint="groupId and artifactId must not be empty.",
        )

    return Dependency(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version or None,
        scope=ScopeType.parse(scope) if scope else None,
        packaging=packaging or None,
    )
