"""LINE Messaging API broadcaster.

Sends a text message to every friend of a LINE official account through
the ``/v2/bot/message/broadcast`` endpoint.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from benotified._constants import ERROR_BODY_EXCERPT, LINE_BROADCAST_ENDPOINT, USER_AGENT
from benotified._redact import redact_for_log
from benotified.config import LineConfig
from benotified.exceptions import BeNotifiedError, BroadcastError

_logger = logging.getLogger(__name__)

#: Maximum length of a LINE text message.
MAX_TEXT_LENGTH = 5000


class LineBroadcaster:
    """Broadcast text messages to all subscribers of a LINE channel.

    Usage::

        async with LineBroadcaster.from_env() as line:
            await line.broadcast_text("Hello everyone!")

    Each call makes exactly one attempt; failures raise
    :class:`~benotified.exceptions.BroadcastError`.
    """

    def __init__(
        self,
        config: LineConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    @classmethod
    def from_env(
        cls,
        *,
        session: aiohttp.ClientSession | None = None,
        **overrides: Any,
    ) -> LineBroadcaster:
        """Build a broadcaster from ``LINE_*`` environment variables.

        Raises
        ------
        BeNotifiedConfigError
            If the channel access token is missing.
        """
        return cls(LineConfig.from_env(**overrides), session=session)

    async def __aenter__(self) -> LineBroadcaster:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            raise BeNotifiedError("Broadcaster not initialized. Use 'async with LineBroadcaster(...) as line:'")
        return self._http_session

    async def broadcast_text(self, text: str) -> None:
        """Send *text* to every subscriber of the channel.

        Raises
        ------
        ValueError
            If *text* is empty or longer than :data:`MAX_TEXT_LENGTH`.
        BroadcastError
            On a connection failure or any non-200 response.
        """
        if not text:
            raise ValueError("broadcast text must not be empty")
        if len(text) > MAX_TEXT_LENGTH:
            raise ValueError(f"broadcast text must be at most {MAX_TEXT_LENGTH} characters, got {len(text)}")

        http = self._require_session()
        endpoint = LINE_BROADCAST_ENDPOINT
        url = f"{self._config.base_url}{endpoint}"
        headers = {
            "authorization": f"Bearer {self._config.channel_access_token}",
            "user-agent": USER_AGENT,
        }
        payload = {"messages": [{"type": "text", "text": text}]}

        _logger.debug("POST %s headers=%s", url, redact_for_log(headers))

        try:
            async with http.post(url, json=payload, headers=headers, timeout=self._timeout) as resp:
                raw = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise BroadcastError(
                f"Broadcast request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        body = raw.decode("utf-8", errors="replace")

        if status != 200:
            raise BroadcastError(
                f"Broadcast failed with HTTP {status}: {body[:ERROR_BODY_EXCERPT]}",
                status_code=status,
                body=body,
                endpoint=endpoint,
            )

        _logger.info("Broadcast sent: %s", text)
