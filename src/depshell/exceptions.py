"""Custom exception hierarchy for depshell.

All exceptions that cross layer boundaries must inherit from
:class:`DepshellError`.  Raw OS and JSON errors raised while reading or
writing the project file must NEVER propagate beyond the infrastructure
layer. They are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
DepshellError
├── InvalidDependencyIdError
├── ProjectStoreError
│   ├── ProjectNotFoundError
│   └── ProjectFormatError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class DepshellError(Exception):
    """Base exception for all depshell errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Dependency identifiers ------------------------------------------------

class InvalidDependencyIdError(DepshellError):
    """Raised when a ``groupId:artifactId[...]`` identifier is malformed."""


# --- Project store ---------------------------------------------------------

class ProjectStoreError(DepshellError):
    """Raised when the project file cannot be read or written."""


class ProjectNotFoundError(ProjectStoreError):
    """Raised when the project file does not exist."""


class ProjectFormatError(ProjectStoreError):
    """Raised when the project file exists but its content is invalid."""


# --- Interaction -----------------------------------------------------------

class PromptCancelledError(DepshellError):
    """Raised when the user dismisses an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DepshellError):
    """Raised when a required runtime dependency is not available."""
