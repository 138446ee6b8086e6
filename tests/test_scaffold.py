"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from slackpost import __version__
from slackpost.cli import exit_codes
from slackpost.cli.app import main
from slackpost.config import Settings
from slackpost.exceptions import (
    AuthError,
    ConfigError,
    CredentialStoreError,
    EnvironmentError,
    RemoteError,
    SlackPostError,
    TransportError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            AuthError,
            RemoteError,
            TransportError,
            CredentialStoreError,
            ConfigError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[SlackPostError]
    ) -> None:
        assert issubclass(exc_class, SlackPostError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(SlackPostError, Exception)

    def test_hint_is_stored(self) -> None:
        err = SlackPostError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = SlackPostError("boom")
        assert err.hint is None

    def test_remote_error_keeps_error_code(self) -> None:
        err = RemoteError("channel_not_found", error_code="channel_not_found")
        assert str(err) == "channel_not_found"
        assert err.error_code == "channel_not_found"
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing (skeleton)
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_prints_help(
        self, settings: Settings, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main([], settings=settings)
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "postMessage" in out
        assert "login" in out

    def test_version_flag(self, settings: Settings) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"], settings=settings)
        assert exc_info.value.code == 0

    def test_help_flag(self, settings: Settings) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"], settings=settings)
        assert exc_info.value.code == 0
