"""Interactive token prompt for the ``login`` command.

Satisfies :class:`~slackpost.core.protocols.SecretPrompt`.  questionary
is imported lazily so that ``--help`` and ``--version`` work without it.
"""

from __future__ import annotations

from typing import Any

from slackpost.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryTokenPrompt:
    """Ask for a secret with a masked questionary input."""

    def ask_secret(self, message: str) -> str | None:
        """Return the typed secret, or ``None`` on Ctrl+C / Esc."""
        questionary = _import_questionary()
        answer: str | None = questionary.password(message).ask()
        return answer
