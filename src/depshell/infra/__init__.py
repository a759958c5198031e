"""Infrastructure layer: external system integration.

This layer owns all interaction with the filesystem.  Every raw
``OSError`` or decoding error must be caught here and re-raised as a
:class:`~depshell.exceptions.DepshellError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from depshell.infra.json_store import (
    DEFAULT_PROJECT_FILE,
    JsonProjectStore,
    dependency_to_entry,
    entry_to_dependency,
)

__all__: list[str] = [
    "DEFAULT_PROJECT_FILE",
    "JsonProjectStore",
    "dependency_to_entry",
    "entry_to_dependency",
]
