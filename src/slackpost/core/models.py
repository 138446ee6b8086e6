"""Domain models for slackpost.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


# ---------------------------------------------------------------------------
# Command definitions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A named ``--option`` accepted by a command."""

    name: str
    """Option name without leading dashes (e.g. ``channel``)."""

    default: str | None
    """Value used when the option is absent from the command line."""

    description: str = ""


@dataclass(frozen=True, slots=True)
class PositionalSpec:
    """A positional argument accepted by a command."""

    name: str
    description: str = ""
    required: bool = True


@dataclass(frozen=True, slots=True)
class CommandDefinition:
    """Static description of one command, fixed at startup."""

    name: str
    description: str
    options: tuple[OptionSpec, ...] = ()
    positionals: tuple[PositionalSpec, ...] = ()

    def option(self, name: str) -> OptionSpec | None:
        return next((opt for opt in self.options if opt.name == name), None)


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """The structured result of parsing one command-line run.

    ``options`` is wrapped in a read-only mapping so the invocation stays
    immutable once parsed.
    """

    command: str
    positional: tuple[str, ...] = ()
    options: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


# ---------------------------------------------------------------------------
# Session / results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CredentialRecord:
    """The single persisted authentication token."""

    token: str

    def to_dict(self) -> dict[str, str]:
        return {"token": self.token}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CredentialRecord | None:
        """Return a record, or ``None`` when *data* holds no usable token."""
        token = data.get("token")
        if not isinstance(token, str) or not token:
            return None
        return cls(token=token)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Terminal outcome of a dispatched command."""

    ok: bool
    message: str
    hint: str | None = None
