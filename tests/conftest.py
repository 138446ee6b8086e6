"""Shared pytest fixtures and configuration for the slackpost test suite.

Guidelines
----------
* No internet access in any test; HTTP goes through ``httpx_mock``.
* Handlers are exercised with an in-memory store and mocked prompt/client.
* The credentials file always lives under ``tmp_path``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from slackpost.cli.logging_setup import PACKAGE_LOGGER
from slackpost.config import Settings
from slackpost.core.commands import CommandContext
from slackpost.infra.credential_store import MemoryCredentialStore

API_URL = "https://slack.test/api"


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        config_dir=tmp_path / "config",
        api_base_url=API_URL,
        default_channel="general",
        log_level="WARNING",
    )


@pytest.fixture
def store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture
def prompt() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client() -> MagicMock:
    fake = MagicMock()
    fake.post_message.return_value = {"ok": True}
    return fake


@pytest.fixture
def context(
    store: MemoryCredentialStore,
    prompt: MagicMock,
    client: MagicMock,
) -> CommandContext:
    return CommandContext(store=store, prompt=prompt, client=client)
