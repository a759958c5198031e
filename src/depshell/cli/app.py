"""CLI application entry point and command routing for depshell.

This module is the **sole error boundary** for the entire application.
It catches :class:`~depshell.exceptions.DepshellError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to
  :class:`~depshell.core.commands.DependencyCommands`.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from depshell.cli import exit_codes
from depshell.cli.console import RichOutputSink, console
from depshell.cli.logging_setup import configure_logging
from depshell.cli.prompts import (
    ask_dependency_id,
    ask_property_name,
    ask_text,
    make_prompter,
    stdin_is_interactive,
)
from depshell.cli.settings import resolve_settings
from depshell.core.commands import DependencyCommands
from depshell.core.models import DEPENDENCY_ID_FORMAT, Dependency, parse_dependency_id
from depshell.core.protocols import ConfirmationPrompter, DependencyStore, OutputSink
from depshell.exceptions import DepshellError, InvalidDependencyIdError
from depshell.infra.json_store import DEFAULT_PROJECT_FILE, JsonProjectStore
from depshell.version import __version__

GAV_HELP: str = (
    f"dependency identifier [{DEPENDENCY_ID_FORMAT}], "
    'ex: "org.jboss.seam.forge:forge-api:1.0.0"'
)

Handler = Callable[[DependencyCommands, argparse.Namespace], int]


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _dependency_arg(text: str) -> Dependency:
    """argparse ``type=`` converter: reject malformed ids before dispatch."""
    try:
        return parse_dependency_id(text)
    except InvalidDependencyIdError as exc:
        message = f"{exc} ({exc.hint})" if exc.hint else str(exc)
        raise argparse.ArgumentTypeError(message) from exc


def _build_parser() -> tuple[argparse.ArgumentParser, dict[str, argparse.ArgumentParser]]:
    """Construct the top-level parser and return it with its sub-parsers.

    Sub-parsers are returned by command name so missing required options
    can be reported against the right usage line.
    """
    parser = argparse.ArgumentParser(
        prog="depshell",
        description="Manage a project's dependencies and build properties.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug).",
    )
    parser.add_argument(
        "-p",
        "--project",
        default=None,
        help=f"Project file to operate on (default: ./{DEFAULT_PROJECT_FILE}).",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Create an empty project file if it does not exist.",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Answer yes to every confirmation prompt.",
    )

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    commands: dict[str, argparse.ArgumentParser] = {}

    add_dep = sub.add_parser("add-dependency", help="Add a dependency to this project.")
    add_dep.add_argument("--gav", type=_dependency_arg, default=None, help=GAV_HELP)
    add_dep.set_defaults(handler=_handle_add_dependency)
    commands["add-dependency"] = add_dep

    remove_dep = sub.add_parser(
        "remove-dependency", help="Remove a dependency from this project."
    )
    remove_dep.add_argument("--gav", type=_dependency_arg, default=None, help=GAV_HELP)
    remove_dep.set_defaults(handler=_handle_remove_dependency)
    commands["remove-dependency"] = remove_dep

    list_deps = sub.add_parser(
        "list-dependencies", help="List all dependencies this project includes."
    )
    list_deps.set_defaults(handler=_handle_list_dependencies)
    commands["list-dependencies"] = list_deps

    set_prop = sub.add_parser("set-property", help="Set a build property.")
    set_prop.add_argument("--name", default=None, help="Property name.")
    set_prop.add_argument("--value", default=None, help="Property value.")
    set_prop.set_defaults(handler=_handle_set_property)
    commands["set-property"] = set_prop

    remove_prop = sub.add_parser("remove-property", help="Remove a build property.")
    remove_prop.add_argument("--name", default=None, help="Property name.")
    remove_prop.set_defaults(handler=_handle_remove_property)
    commands["remove-property"] = remove_prop

    list_props = sub.add_parser("list-properties", help="List all build properties.")
    list_props.set_defaults(handler=_handle_list_properties)
    commands["list-properties"] = list_props

    return parser, commands


# ---------------------------------------------------------------------------
# Missing required options
# ---------------------------------------------------------------------------

def _fill_missing_options(
    args: argparse.Namespace,
    subparser: argparse.ArgumentParser,
    store: DependencyStore,
) -> None:
    """Prompt for required options left off the command line.

    Without a terminal the omission is a usage error (exit code 2).
    """
    askers: dict[str, Callable[[], object]] = {
        "gav": ask_dependency_id,
        "name": lambda: ask_property_name(list(store.get_properties())),
        "value": lambda: ask_text("Property value"),
    }
    missing = [
        option
        for option in ("gav", "name", "value")
        if hasattr(args, option) and getattr(args, option) is None
    ]
    if not missing:
        return

    if not stdin_is_interactive():
        flags = ", ".join(f"--{option}" for option in missing)
        subparser.error(f"the following arguments are required: {flags}")

    for option in missing:
        setattr(args, option, askers[option]())


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_add_dependency(commands: DependencyCommands, args: argparse.Namespace) -> int:
    commands.add_dependency(args.gav)
    return exit_codes.OK


def _handle_remove_dependency(commands: DependencyCommands, args: argparse.Namespace) -> int:
    commands.remove_dependency(args.gav)
    return exit_codes.OK


def _handle_list_dependencies(commands: DependencyCommands, args: argparse.Namespace) -> int:
    commands.list_dependencies()
    return exit_codes.OK


def _handle_set_property(commands: DependencyCommands, args: argparse.Namespace) -> int:
    commands.set_property(args.name, args.value)
    return exit_codes.OK


def _handle_remove_property(commands: DependencyCommands, args: argparse.Namespace) -> int:
    commands.remove_property(args.name)
    return exit_codes.OK


def _handle_list_properties(commands: DependencyCommands, args: argparse.Namespace) -> int:
    commands.list_properties()
    return exit_codes.OK


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    prompter: ConfirmationPrompter | None = None,
    out: OutputSink | None = None,
) -> int:
    """Run the depshell CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    prompter:
        Confirmation strategy override.  By default it is chosen from
        ``--yes`` and whether stdin is a terminal.
    out:
        Output sink override.  Defaults to Rich on stdout.

    Returns
    -------
    int
        OS process exit code.
    """
    parser, subparsers = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.OK

    settings = resolve_settings(
        project=args.project,
        assume_yes=args.yes,
        create_project=args.init,
        verbosity=args.verbose,
    )
    configure_logging(settings.log_level)

    store = JsonProjectStore.open(settings.project_path, create=settings.create_project)
    _fill_missing_options(args, subparsers[args.command], store)

    commands = DependencyCommands(
        store,
        prompter if prompter is not None else make_prompter(assume_yes=settings.assume_yes),
        out if out is not None else RichOutputSink(),
    )
    handler: Handler = args.handler
    return handler(commands, args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DepshellError as exc:
        console.print(f"[bold red]Error:[/bold red] {_escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {_escape(exc.hint)}")
        sys.exit(exit_codes.COMMAND_FAILED)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.INTERRUPTED)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {_escape(str(exc))}"
        )
        sys.exit(exit_codes.CRASHED)


def _escape(text: str) -> str:
    """Escape Rich markup in messages that echo user input (``[g:a]``)."""
    from rich.markup import escape

    return escape(text)
