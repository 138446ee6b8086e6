"""Allow ``python -m slackpost`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m slackpost`` behaves identically to the ``slackpost``
console script.
"""

from __future__ import annotations

from slackpost.cli.app import cli

if __name__ == "__main__":
    cli()
