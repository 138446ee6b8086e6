"""httpx-backed implementation of :class:`~slackpost.core.protocols.MessageClient`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions are caught here and re-raised as
:class:`~slackpost.exceptions.TransportError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from slackpost.config import DEFAULT_API_URL
from slackpost.exceptions import TransportError

logger = logging.getLogger(__name__)


class SlackWebClient:
    """Minimal Slack Web API client.

    Usage::

        client = SlackWebClient()
        body = client.post_message(token, "general", "Hello")

    Parameters
    ----------
    base_url:
        API root, e.g. ``https://slack.com/api``.
    client:
        Optional pre-built :class:`httpx.Client`.  When omitted, a
        short-lived client is created per call.
    """

    POST_MESSAGE_METHOD: str = "chat.postMessage"

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url: str = base_url.rstrip("/")
        self._client: httpx.Client | None = client

    def _url(self, method: str) -> str:
        return f"{self._base_url}/{method}"

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def post_message(self, token: str, channel: str, text: str) -> dict[str, Any]:
        """POST ``{channel, text}`` to ``chat.postMessage``.

        Returns
        -------
        dict[str, Any]
            The decoded JSON body.  The caller inspects ``ok``/``error``.

        Raises
        ------
        TransportError
            On any network failure, or when the body is not a JSON object.
        """
        url = self._url(self.POST_MESSAGE_METHOD)
        headers = {"Authorization": f"Bearer {token}"}
        payload = {"channel": channel, "text": text}

        logger.debug("POST %s channel=%s", url, channel)
        try:
            if self._client is not None:
                response = self._client.post(url, headers=headers, json=payload)
            else:
                with httpx.Client() as client:
                    response = client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Could not reach Slack: {exc}",
                hint="Check your network connection and try again.",
            ) from exc

        logger.debug("Slack answered HTTP %d", response.status_code)
        return self._decode(response)

    # ------------------------------------------------------------------
    # Response decoding
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        """Return the JSON object in *response* or raise :class:`TransportError`."""
        try:
            body: Any = response.json()
        except ValueError as exc:
            raise TransportError(
                f"Malformed response from Slack (HTTP {response.status_code}).",
            ) from exc

        if not isinstance(body, dict):
            raise TransportError(
                f"Malformed response from Slack (HTTP {response.status_code}).",
            )
        return body
