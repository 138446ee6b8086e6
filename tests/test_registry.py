"""Tests for the command registry and dispatcher (core/registry.py).

Handlers are plain mocks; the context is an opaque sentinel.
"""

from __future__ import annotations

from unittest.mock import MagicMock, sentinel

import pytest

from slackpost.core.commands import build_registry
from slackpost.core.models import CommandDefinition, CommandResult, Invocation
from slackpost.core.registry import CommandName, CommandRegistry
from slackpost.exceptions import AuthError, RemoteError, UsageError


def _definition(name: str) -> CommandDefinition:
    return CommandDefinition(name=name, description=f"{name} command")


def _registry_with(**handlers: MagicMock) -> CommandRegistry:
    registry = CommandRegistry()
    for name, handler in handlers.items():
        registry.register(name, _definition(name), handler)
    return registry


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class TestRegister:
    def test_register_and_lookup(self) -> None:
        handler = MagicMock()
        registry = _registry_with(login=handler)
        command = registry.get("login")
        assert command is not None
        assert command.handler is handler
        assert command.name == "login"
        assert "login" in registry
        assert len(registry) == 1

    def test_accepts_enum_name(self) -> None:
        registry = CommandRegistry()
        registry.register(CommandName.LOGIN, _definition("login"), MagicMock())
        assert registry.names() == ["login"]

    def test_duplicate_raises(self) -> None:
        registry = _registry_with(login=MagicMock())
        with pytest.raises(ValueError, match="already registered"):
            registry.register("login", _definition("login"), MagicMock())

    def test_name_must_match_definition(self) -> None:
        registry = CommandRegistry()
        with pytest.raises(ValueError, match="does not match"):
            registry.register("login", _definition("logout"), MagicMock())

    def test_names_keep_registration_order(self) -> None:
        registry = _registry_with(b=MagicMock(), a=MagicMock())
        assert registry.names() == ["b", "a"]
        assert [d.name for d in registry.definitions()] == ["b", "a"]


class TestVerifyComplete:
    def test_missing_commands_raise(self) -> None:
        registry = _registry_with(login=MagicMock())
        with pytest.raises(ValueError) as exc_info:
            registry.verify_complete()
        assert "logout" in str(exc_info.value)
        assert "postMessage" in str(exc_info.value)

    def test_build_registry_is_complete(self) -> None:
        registry = build_registry("general")
        registry.verify_complete()
        assert sorted(registry.names()) == sorted(name.value for name in CommandName)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestDispatch:
    def test_invokes_matching_handler(self) -> None:
        login = MagicMock(return_value="Logged in.")
        logout = MagicMock()
        registry = _registry_with(login=login, logout=logout)
        invocation = Invocation(command="login")

        result = registry.dispatch(invocation, sentinel.context)

        assert result == CommandResult(ok=True, message="Logged in.")
        login.assert_called_once_with(invocation, sentinel.context)
        logout.assert_not_called()

    def test_unknown_command_invokes_nothing(self) -> None:
        login = MagicMock()
        logout = MagicMock()
        registry = _registry_with(login=login, logout=logout)

        with pytest.raises(UsageError) as exc_info:
            registry.dispatch(Invocation(command="sendEmail"), sentinel.context)

        login.assert_not_called()
        logout.assert_not_called()
        assert "sendEmail" in str(exc_info.value)
        assert exc_info.value.hint == "Available commands: login, logout"

    def test_domain_failure_becomes_result(self) -> None:
        handler = MagicMock(
            side_effect=RemoteError("channel_not_found", error_code="channel_not_found"),
        )
        registry = _registry_with(postMessage=handler)

        result = registry.dispatch(Invocation(command="postMessage"), sentinel.context)

        assert result.ok is False
        assert result.message == "channel_not_found"

    def test_failure_keeps_hint(self) -> None:
        handler = MagicMock(side_effect=AuthError("nope", hint="log in"))
        registry = _registry_with(postMessage=handler)

        result = registry.dispatch(Invocation(command="postMessage"), sentinel.context)

        assert result == CommandResult(ok=False, message="nope", hint="log in")

    def test_unexpected_exception_propagates(self) -> None:
        handler = MagicMock(side_effect=RuntimeError("bug"))
        registry = _registry_with(login=handler)

        with pytest.raises(RuntimeError, match="bug"):
            registry.dispatch(Invocation(command="login"), sentinel.context)
