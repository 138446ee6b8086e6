"""Command handlers and the static command table.

Each handler receives the parsed :class:`Invocation` and a
:class:`CommandContext` carrying its collaborators.  Handlers never
touch the filesystem, the terminal or the network directly; they go
through the injected store, prompt and client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from slackpost.core.models import CommandDefinition, Invocation, OptionSpec, PositionalSpec
from slackpost.core.protocols import CredentialStore, MessageClient, SecretPrompt
from slackpost.core.registry import CommandName, CommandRegistry
from slackpost.exceptions import AuthError, RemoteError, TransportError, UsageError

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE: str = "You must be logged in to post messages."
LOGIN_HINT: str = "Run 'slackpost login' first."
TOKEN_PROMPT_MESSAGE: str = "Slack API token:"


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Collaborators shared by all handlers for one process run."""

    store: CredentialStore
    prompt: SecretPrompt
    client: MessageClient


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def login(invocation: Invocation, context: CommandContext) -> str:
    """Prompt for an API token and persist it.

    The store is left untouched when the prompt is cancelled or the
    answer is blank.
    """
    answer = context.prompt.ask_secret(TOKEN_PROMPT_MESSAGE)
    if answer is None:
        raise AuthError("Login cancelled.")

    token = answer.strip()
    if not token:
        raise AuthError(
            "No token entered.",
            hint="Paste a Slack API token (it usually starts with 'xox').",
        )

    context.store.set(token)
    logger.info("Stored new API token")
    return "Logged in."


def logout(invocation: Invocation, context: CommandContext) -> str:
    """Forget the stored API token."""
    if context.store.clear():
        return "Logged out."
    return "Not logged in."


def post_message(invocation: Invocation, context: CommandContext) -> str:
    """Post ``invocation.positional[0]`` to the selected channel.

    Makes no network call without a stored token.  One attempt, no
    retries.

    Raises
    ------
    AuthError
        If no token is stored.
    RemoteError
        If the API answers ``ok: false``; the message is the API's
        ``error`` string verbatim.
    TransportError
        If the API answer has no boolean ``ok`` flag.
    """
    if not invocation.positional:
        raise UsageError("Missing message text.")
    text = invocation.positional[0]
    channel = invocation.options.get("channel")
    if not channel:
        raise UsageError("Missing channel.")

    token = context.store.get()
    if not token:
        raise AuthError(LOGIN_REQUIRED_MESSAGE, hint=LOGIN_HINT)

    body = context.client.post_message(token, channel, text)

    ok = body.get("ok")
    if ok is True:
        return f"Message posted to {channel}."
    if ok is False:
        error_code = str(body.get("error") or "unknown_error")
        raise RemoteError(error_code, error_code=error_code)

    raise TransportError("Unexpected response from Slack: missing 'ok' flag.")


# ---------------------------------------------------------------------------
# Command table
# ---------------------------------------------------------------------------

def command_definitions(default_channel: str) -> dict[CommandName, CommandDefinition]:
    """Return the static definition of every command."""
    return {
        CommandName.LOGIN: CommandDefinition(
            name=CommandName.LOGIN.value,
            description="Store a Slack API token for later commands.",
        ),
        CommandName.LOGOUT: CommandDefinition(
            name=CommandName.LOGOUT.value,
            description="Remove the stored Slack API token.",
        ),
        CommandName.POST_MESSAGE: CommandDefinition(
            name=CommandName.POST_MESSAGE.value,
            description="Post a message to a Slack channel.",
            options=(
                OptionSpec(
                    name="channel",
                    default=default_channel,
                    description="Channel to post to.",
                ),
            ),
            positionals=(
                PositionalSpec(name="message", description="Message text."),
            ),
        ),
    }


_HANDLERS = {
    CommandName.LOGIN: login,
    CommandName.LOGOUT: logout,
    CommandName.POST_MESSAGE: post_message,
}


def build_registry(default_channel: str) -> CommandRegistry:
    """Build and verify the command registry used for one process run."""
    registry = CommandRegistry()
    for name, definition in command_definitions(default_channel).items():
        registry.register(name, definition, _HANDLERS[name])
    registry.verify_complete()
    return registry
