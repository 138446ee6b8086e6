"""Process exit codes returned by :func:`slackpost.cli.app.main`.

Every failure the user can act on (bad arguments, missing login, Slack
rejecting the post, network trouble, an unreadable credentials file)
shares one code; only crashes and Ctrl+C get their own.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran and its confirmation line was printed."""

GENERAL_ERROR: int = 1
"""A reported failure: usage, auth, remote, transport, store or config error."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C, e.g. during the login prompt (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A non-slackpost exception reached the ``cli()`` boundary."""
