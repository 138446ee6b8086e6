"""Infrastructure: on-disk and in-memory credential stores.

Both classes satisfy :class:`~slackpost.core.protocols.CredentialStore`
structurally.  The file store keeps one JSON document of the form
``{"token": "..."}`` at a fixed path inside the per-application config
directory.

Rules
-----
* A missing file means "not logged in" — never an error.
* ``OSError`` and JSON errors are re-raised as
  :class:`~slackpost.exceptions.CredentialStoreError`.
* The token is never logged.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from slackpost.core.models import CredentialRecord
from slackpost.exceptions import CredentialStoreError

logger = logging.getLogger(__name__)

_RELOGIN_HINT = "Run 'slackpost login' to store a new token."
_FILE_MODE = 0o600


class FileCredentialStore:
    """Credential store backed by a single JSON file.

    Parameters
    ----------
    path:
        Location of the credentials file.  Parent directories are
        created on first write.
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> str | None:
        """Return the stored token, or ``None`` if the file does not exist."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No credentials file at %s", self._path)
            return None
        except OSError as exc:
            raise CredentialStoreError(
                f"Cannot read credentials file {self._path}: {exc.strerror or exc}",
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CredentialStoreError(
                f"Credentials file {self._path} is corrupt.",
                hint=_RELOGIN_HINT,
            ) from exc

        if not isinstance(data, dict):
            raise CredentialStoreError(
                f"Credentials file {self._path} is corrupt.",
                hint=_RELOGIN_HINT,
            )

        record = CredentialRecord.from_dict(data)
        return record.token if record is not None else None

    def set(self, token: str) -> None:
        """Overwrite the credentials file with *token*.

        The file is owner-only (``0600``) before any byte of the token
        is written, including when it already existed with a wider mode.
        """
        record = CredentialRecord(token=token)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
            if hasattr(os, "fchmod"):
                try:
                    os.fchmod(fd, _FILE_MODE)
                except OSError:
                    os.close(fd)
                    raise
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(record.to_dict()))
        except OSError as exc:
            raise CredentialStoreError(
                f"Cannot write credentials file {self._path}: {exc.strerror or exc}",
            ) from exc
        logger.debug("Wrote credentials file %s", self._path)

    def clear(self) -> bool:
        """Delete the credentials file; return whether it existed."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise CredentialStoreError(
                f"Cannot remove credentials file {self._path}: {exc.strerror or exc}",
            ) from exc
        logger.debug("Removed credentials file %s", self._path)
        return True


class MemoryCredentialStore:
    """Process-local credential store, used for tests and embedding."""

    def __init__(self, token: str | None = None) -> None:
        self._token: str | None = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> bool:
        existed = self._token is not None
        self._token = None
        return existed
