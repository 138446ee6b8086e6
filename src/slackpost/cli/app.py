"""CLI application entry point and command routing for slackpost.

This module is the **sole process-level error boundary** for the
application.  It catches :class:`~slackpost.exceptions.SlackPostError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — handlers live in ``core.commands``.
* Command results go to stdout; error-boundary messages go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys

from slackpost.cli import exit_codes
from slackpost.cli.console import console, err_console, escape
from slackpost.cli.logging_setup import configure_logging
from slackpost.cli.parser import build_parser, invocation_from_namespace
from slackpost.config import Settings, load_settings
from slackpost.core.commands import CommandContext, build_registry
from slackpost.core.models import CommandResult
from slackpost.exceptions import SlackPostError, UsageError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_context(settings: Settings) -> CommandContext:
    """Instantiate the concrete store, prompt and client."""
    from slackpost.cli.token_prompt import QuestionaryTokenPrompt
    from slackpost.infra.credential_store import FileCredentialStore
    from slackpost.infra.slack_client import SlackWebClient

    return CommandContext(
        store=FileCredentialStore(settings.credentials_path),
        prompt=QuestionaryTokenPrompt(),
        client=SlackWebClient(settings.api_base_url),
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_error(exc: SlackPostError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def _report(result: CommandResult) -> int:
    """Print *result* on stdout and map it to an exit code."""
    if result.ok:
        console.print(result.message, markup=False)
        return exit_codes.SUCCESS

    console.print(f"[bold red]Error:[/bold red] {escape(result.message)}")
    if result.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(result.hint)}")
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    context: CommandContext | None = None,
) -> int:
    """Run the slackpost CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    settings:
        Pre-resolved configuration.  Loaded from the environment when
        ``None``.
    context:
        Handler collaborators.  Built from *settings* when ``None``;
        tests pass in-memory fakes here.

    Returns
    -------
    int
        OS process exit code.
    """
    if settings is None:
        settings = load_settings()

    registry = build_registry(settings.default_channel)
    parser = build_parser(registry)

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        _render_error(exc)
        return exit_codes.GENERAL_ERROR

    configure_logging(logging.DEBUG if args.verbose else settings.log_level_value)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if context is None:
        context = _build_context(settings)

    try:
        invocation = invocation_from_namespace(args, registry)
        result = registry.dispatch(invocation, context)
    except UsageError as exc:
        _render_error(exc)
        return exit_codes.GENERAL_ERROR

    logger.debug("Command %s finished ok=%s", invocation.command, result.ok)
    return _report(result)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SlackPostError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
