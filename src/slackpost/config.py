"""Runtime configuration for slackpost.

Settings are read from environment variables once per process run and
frozen.  Blank values fall back to the defaults below.

Variables
---------
``SLACKPOST_CONFIG_DIR``
    Directory holding ``credentials.json``.  Defaults to
    ``$XDG_CONFIG_HOME/slackpost`` or ``~/.config/slackpost``.
``SLACKPOST_API_URL``
    Base URL of the Slack Web API.
``SLACKPOST_DEFAULT_CHANNEL``
    Channel used by ``postMessage`` when ``--channel`` is absent.
``SLACKPOST_LOG_LEVEL``
    Log level name used when ``--verbose`` is not given.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from slackpost.exceptions import ConfigError

APP_NAME: str = "slackpost"

DEFAULT_API_URL: str = "https://slack.com/api"
DEFAULT_CHANNEL: str = "general"
DEFAULT_LOG_LEVEL: str = "WARNING"

CREDENTIALS_FILENAME: str = "credentials.json"

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for one process run."""

    config_dir: Path
    """Per-application configuration directory."""

    api_base_url: str
    """Slack Web API base URL, without trailing slash."""

    default_channel: str
    """Channel used when ``--channel`` is not given."""

    log_level: str
    """Upper-case :mod:`logging` level name."""

    @property
    def credentials_path(self) -> Path:
        return self.config_dir / CREDENTIALS_FILENAME

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _get(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key, "").strip()
    return value or None


def _default_config_dir(environ: Mapping[str, str]) -> Path:
    xdg = _get(environ, "XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_NAME


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (``os.environ`` by default).

    Raises
    ------
    ConfigError
        If ``SLACKPOST_LOG_LEVEL`` is not a known level name.
    """
    env = os.environ if environ is None else environ

    config_dir_raw = _get(env, "SLACKPOST_CONFIG_DIR")
    config_dir = (
        Path(config_dir_raw).expanduser()
        if config_dir_raw
        else _default_config_dir(env)
    )

    api_url = (_get(env, "SLACKPOST_API_URL") or DEFAULT_API_URL).rstrip("/")
    channel = _get(env, "SLACKPOST_DEFAULT_CHANNEL") or DEFAULT_CHANNEL

    log_level = (_get(env, "SLACKPOST_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level: {log_level}",
            hint=f"SLACKPOST_LOG_LEVEL must be one of: {', '.join(_LOG_LEVELS)}",
        )

    return Settings(
        config_dir=config_dir,
        api_base_url=api_url,
        default_channel=channel,
        log_level=log_level,
    )
