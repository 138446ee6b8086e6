"""slackpost — post messages to Slack from the command line.

A small command dispatcher with a persisted API token and a single
remote call per invocation.
"""

from slackpost.version import __version__

__all__: list[str] = ["__version__"]
