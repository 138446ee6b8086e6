"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the Slack Web
API.  Every raw third-party or OS exception must be caught here and
re-raised as a :class:`~slackpost.exceptions.SlackPostError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from slackpost.infra.credential_store import FileCredentialStore, MemoryCredentialStore
from slackpost.infra.slack_client import SlackWebClient

__all__: list[str] = [
    "FileCredentialStore",
    "MemoryCredentialStore",
    "SlackWebClient",
]
