"""Command registry and dispatcher.

The registry is a static table mapping each :class:`CommandName` to its
:class:`~slackpost.core.models.CommandDefinition` and handler.  It is
filled once at startup and checked for completeness, so every declared
command is guaranteed a handler before anything is dispatched.

Dispatch states
---------------
awaiting dispatch → handler running → success | reported failure
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from slackpost.core.models import CommandDefinition, CommandResult, Invocation
from slackpost.exceptions import SlackPostError, UsageError

logger = logging.getLogger(__name__)

Handler = Callable[[Invocation, Any], str]
"""A handler receives the invocation and the command context and returns
the confirmation line shown to the user.  Failures are raised as
:class:`~slackpost.exceptions.SlackPostError` subclasses."""


class CommandName(str, enum.Enum):
    """Every command the tool knows about."""

    LOGIN = "login"
    LOGOUT = "logout"
    POST_MESSAGE = "postMessage"


@dataclass(frozen=True, slots=True)
class Command:
    """A registered command: its static definition plus its handler."""

    definition: CommandDefinition
    handler: Handler

    @property
    def name(self) -> str:
        return self.definition.name


class CommandRegistry:
    """Name → :class:`Command` table with exact-match dispatch."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: CommandName | str,
        definition: CommandDefinition,
        handler: Handler,
    ) -> None:
        """Add a command.

        Raises
        ------
        ValueError
            If *name* is already registered or disagrees with
            ``definition.name``.
        """
        key = name.value if isinstance(name, CommandName) else name
        if key != definition.name:
            raise ValueError(
                f"Command name {key!r} does not match definition {definition.name!r}",
            )
        if key in self._commands:
            raise ValueError(f"Command {key!r} is already registered")
        self._commands[key] = Command(definition=definition, handler=handler)

    def verify_complete(self) -> None:
        """Raise ``ValueError`` unless every :class:`CommandName` is registered."""
        missing = [name.value for name in CommandName if name.value not in self._commands]
        if missing:
            raise ValueError(f"No handler registered for: {', '.join(missing)}")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def names(self) -> list[str]:
        return list(self._commands)

    def definitions(self) -> Iterator[CommandDefinition]:
        for command in self._commands.values():
            yield command.definition

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, invocation: Invocation, context: Any) -> CommandResult:
        """Run the handler registered for ``invocation.command``.

        Handler failures are returned as a failed :class:`CommandResult`
        instead of propagating.

        Raises
        ------
        UsageError
            If the command name is not registered.  No handler runs.
        """
        command = self._commands.get(invocation.command)
        if command is None:
            raise UsageError(
                f"Unknown command: {invocation.command}",
                hint=f"Available commands: {', '.join(self.names())}",
            )

        logger.debug("Dispatching %s", command.name)
        try:
            message = command.handler(invocation, context)
        except SlackPostError as exc:
            logger.debug("Command %s failed: %s", command.name, type(exc).__name__)
            return CommandResult(ok=False, message=str(exc), hint=exc.hint)

        return CommandResult(ok=True, message=message)
