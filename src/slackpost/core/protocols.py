"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Command handlers depend ONLY on these protocols — never on
concrete implementations — so tests can substitute in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Protocol


class CredentialStore(Protocol):
    """Persistence boundary for the single authentication token."""

    def get(self) -> str | None:
        """Return the stored token, or ``None`` when not logged in.

        A missing store is not an error.

        Raises
        ------
        CredentialStoreError
            When the store exists but cannot be read.
        """
        ...  # pragma: no cover

    def set(self, token: str) -> None:
        """Persist *token*, replacing any previous one.

        Raises
        ------
        CredentialStoreError
            When the store cannot be written.
        """
        ...  # pragma: no cover

    def clear(self) -> bool:
        """Remove the stored token; return whether one existed."""
        ...  # pragma: no cover


class SecretPrompt(Protocol):
    """Capability to obtain a secret interactively from the user."""

    def ask_secret(self, message: str) -> str | None:
        """Prompt with *message*; return the answer or ``None`` if cancelled."""
        ...  # pragma: no cover


class MessageClient(Protocol):
    """Contract for the remote messaging backend.

    Implementations must map all backend-specific exceptions to
    :class:`~slackpost.exceptions.SlackPostError` subclasses.
    """

    def post_message(self, token: str, channel: str, text: str) -> dict[str, Any]:
        """Send *text* to *channel* and return the decoded response body.

        The body carries at least ``"ok"`` (``bool``) and, on failure,
        ``"error"`` (``str``).

        Raises
        ------
        TransportError
            On network failure or a body that is not a JSON object.
        """
        ...  # pragma: no cover
