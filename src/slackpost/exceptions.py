"""Custom exception hierarchy for slackpost.

All exceptions that cross layer boundaries must inherit from
:class:`SlackPostError`.  Raw third-party exceptions (e.g. from httpx)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
SlackPostError
├── UsageError
├── AuthError
├── RemoteError
├── TransportError
├── CredentialStoreError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations


class SlackPostError(Exception):
    """Base exception for all slackpost errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the dispatcher and the CLI error boundary can
    render a clean message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(SlackPostError):
    """Raised for bad or missing arguments and unknown commands."""


# --- Session ---------------------------------------------------------------

class AuthError(SlackPostError):
    """Raised when no usable API token is available."""


class CredentialStoreError(SlackPostError):
    """Raised when the credential file cannot be read or written."""


# --- Remote API ------------------------------------------------------------

class RemoteError(SlackPostError):
    """Raised when the Slack API answers with ``ok: false``.

    The message is the API's ``error`` string, passed through verbatim.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.error_code: str = error_code


class TransportError(SlackPostError):
    """Raised on network failure or an unreadable API response."""


# --- Environment / configuration -------------------------------------------

class ConfigError(SlackPostError):
    """Raised when a configuration value is invalid."""


class EnvironmentError(SlackPostError):
    """Raised when a required runtime dependency is not available."""
