"""Core / service layer — command table, dispatch and handlers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; collaborators are injected.
* No imports from ``cli`` or ``infra``.
"""

from slackpost.core.commands import CommandContext, build_registry
from slackpost.core.models import (
    CommandDefinition,
    CommandResult,
    CredentialRecord,
    Invocation,
    OptionSpec,
    PositionalSpec,
)
from slackpost.core.protocols import CredentialStore, MessageClient, SecretPrompt
from slackpost.core.registry import Command, CommandName, CommandRegistry

__all__: list[str] = [
    "Command",
    "CommandContext",
    "CommandDefinition",
    "CommandName",
    "CommandRegistry",
    "CommandResult",
    "CredentialRecord",
    "CredentialStore",
    "Invocation",
    "MessageClient",
    "OptionSpec",
    "PositionalSpec",
    "SecretPrompt",
    "build_registry",
]
