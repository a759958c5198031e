"""Core / service layer: command logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from depshell.core.commands import DependencyCommands
from depshell.core.formatting import Color, format_dependency_line
from depshell.core.memory_store import InMemoryDependencyStore
from depshell.core.models import Dependency, ScopeType, parse_dependency_id
from depshell.core.protocols import ConfirmationPrompter, DependencyStore, OutputSink

__all__: list[str] = [
    "Color",
    "ConfirmationPrompter",
    "Dependency",
    "DependencyCommands",
    "DependencyStore",
    "InMemoryDependencyStore",
    "OutputSink",
    "ScopeType",
    "format_dependency_line",
    "parse_dependency_id",
]
