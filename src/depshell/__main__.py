"""Allow ``python -m depshell`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m depshell`` behaves identically to the ``depshell``
console script.
"""

from __future__ import annotations

from depshell.cli.app import cli

if __name__ == "__main__":
    cli()
