"""Argument parser: raw argv → :class:`~slackpost.core.models.Invocation`.

The argparse tree is generated from the command registry, one
sub-parser per :class:`~slackpost.core.models.CommandDefinition`.
Parse errors raise :class:`~slackpost.exceptions.UsageError` instead of
exiting the process; only ``--help`` and ``--version`` still exit.
"""

from __future__ import annotations

import argparse
from typing import NoReturn

from slackpost.core.models import CommandDefinition, Invocation
from slackpost.core.registry import CommandRegistry
from slackpost.exceptions import UsageError
from slackpost.version import __version__

PROG: str = "slackpost"

_POSITIONAL_PREFIX = "pos_"
_OPTION_PREFIX = "opt_"


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose errors raise :class:`UsageError`.

    Sub-parsers inherit this class through ``add_subparsers``.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=self.format_usage().strip())


def _add_command(
    subparsers: argparse._SubParsersAction,
    definition: CommandDefinition,
) -> None:
    command_parser = subparsers.add_parser(
        definition.name,
        help=definition.description,
        description=definition.description,
    )
    for positional in definition.positionals:
        command_parser.add_argument(
            _POSITIONAL_PREFIX + positional.name,
            metavar=positional.name,
            nargs=None if positional.required else "?",
            help=positional.description,
        )
    for option in definition.options:
        default_note = f" (default: {option.default})" if option.default else ""
        command_parser.add_argument(
            f"--{option.name}",
            dest=_OPTION_PREFIX + option.name,
            default=option.default,
            metavar=option.name.upper(),
            help=f"{option.description}{default_note}",
        )


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    """Construct the top-level parser for every registered command."""
    parser = _RaisingArgumentParser(
        prog=PROG,
        description="Post messages to Slack from the command line.",
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
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(
        dest="command",
        metavar="<command>",
        title="commands",
    )
    for definition in registry.definitions():
        _add_command(subparsers, definition)
    return parser


def invocation_from_namespace(
    args: argparse.Namespace,
    registry: CommandRegistry,
) -> Invocation:
    """Convert parsed *args* into an :class:`Invocation`.

    Positionals keep their declared order; absent optional positionals
    are dropped.  Every declared option is present, carrying its default
    when it was not given.  An unregistered name yields a bare
    invocation; :meth:`CommandRegistry.dispatch` rejects it.

    Raises
    ------
    UsageError
        If no command was given.
    """
    name: str | None = getattr(args, "command", None)
    if name is None:
        raise UsageError("No command given.", hint=f"Run '{PROG} --help'.")

    command = registry.get(name)
    if command is None:
        return Invocation(command=name)

    definition = command.definition
    positional: list[str] = []
    for spec in definition.positionals:
        value = getattr(args, _POSITIONAL_PREFIX + spec.name, None)
        if value is not None:
            positional.append(value)

    options = {
        spec.name: getattr(args, _OPTION_PREFIX + spec.name, spec.default)
        for spec in definition.options
    }

    return Invocation(command=name, positional=tuple(positional), options=options)


def parse_invocation(argv: list[str], registry: CommandRegistry) -> Invocation:
    """Parse *argv* (without the program name) into an :class:`Invocation`.

    Raises
    ------
    UsageError
        On unknown commands, unknown options or missing positionals.
    """
    args = build_parser(registry).parse_args(argv)
    return invocation_from_namespace(args, registry)
