"""depshell: dependency and build-property commands for a project.

A thin command set over a project dependency store, with a Rich/questionary
shell front end and a strict layered architecture.
"""

from depshell.version import __version__

__all__: list[str] = ["__version__"]
