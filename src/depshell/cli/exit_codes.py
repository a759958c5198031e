"""Process exit statuses returned by ``depshell``.

Scripts driving depshell can tell these outcomes apart:

* ``OK``: the command ran.  Declined prompts and removing something that
  is not there still count as success.
* ``COMMAND_FAILED``: a :class:`~depshell.exceptions.DepshellError` was
  reported (missing or malformed project file, bad identifier, failed
  write, cancelled prompt).
* ``USAGE_ERROR``: argparse rejected the command line.
* ``CRASHED``: a bug; the exception type is printed for the report.
* ``INTERRUPTED``: Ctrl+C.
"""

from __future__ import annotations

OK: int = 0

COMMAND_FAILED: int = 1

USAGE_ERROR: int = 2
"""Matches the status :meth:`argparse.ArgumentParser.error` exits with."""

CRASHED: int = 3

INTERRUPTED: int = 130
"""128 + SIGINT."""
