"""CLI console helpers built on Rich.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
do not pay for it.  Two consoles exist: command output goes to stdout
through :class:`RichOutputSink`; errors, hints and log records go to
stderr through :data:`console`.
"""

from __future__ import annotations

from typing import Any

from depshell.core.formatting import Color
from depshell.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""``print``-compatible proxy that resolves the stderr console per call.

	Resolving lazily keeps output pointed at the current ``sys.stderr``,
	which pytest's ``capsys`` swaps between tests.
	"""

	def print(self, *objects: object) -> None:
		get_rich_console().print(*objects)


console = _ConsoleProxy()


class RichOutputSink:
	"""Concrete :class:`~depshell.core.protocols.OutputSink` writing to a Rich console.

	Text is printed literally (markup and highlighting disabled) and never
	soft-wrapped, so listing lines stay intact when piped.

	Parameters
	----------
	rich_console:
		Console to write to.  Defaults to a stdout console.
	"""

	def __init__(self, rich_console: Any | None = None) -> None:
		self._console: Any = (
			rich_console if rich_console is not None else get_rich_console(stderr=False)
		)

	@staticmethod
	def _style(style: Color | None) -> str | None:
		if style is None or style is Color.NONE:
			return None
		return style.value

	def print(self, text: str, style: Color | None = None) -> None:
		self._write(text, style, end="")

	def println(self, text: str = "", style: Color | None = None) -> None:
		self._write(text, style, end="\n")

	def _write(self, text: str, style: Color | None, *, end: str) -> None:
		self._console.print(
			text,
			style=self._style(style),
			end=end,
			markup=False,
			highlight=False,
			soft_wrap=True,
		)
