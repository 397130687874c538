"""HTTP transport for the moments API."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import urlencode

import aiohttp

from benotified._constants import ERROR_BODY_EXCERPT, USER_AGENT
from benotified._redact import redact_url
from benotified.config import BeRealConfig
from benotified.exceptions import (
    BeRealHttpStatusError,
    BeRealResponseParseError,
    BeRealResponseReadError,
    BeRealTransportError,
    FetchError,
)

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        ...


class HttpTransport:
    """GET-and-decode transport with one bounded attempt per call."""

    def __init__(self, config: BeRealConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        """Send a GET request and return the decoded JSON body.

        1. GET ``{base_url}{endpoint}`` with *params* as the query string
        2. Read the whole body
        3. Reject any status other than 200
        4. JSON-decode the body
        """
        url = f"{self._config.base_url}{endpoint}"
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }

        _logger.debug("GET %s", redact_url(f"{url}?{urlencode(dict(params))}"))

        try:
            async with self._http.get(url, params=dict(params), headers=headers, timeout=self._timeout) as resp:
                status = resp.status
                try:
                    raw = await resp.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                    if status == 200:
                        raise BeRealResponseReadError(
                            f"Failed to read response from {endpoint}: {exc}",
                            endpoint=endpoint,
                        ) from exc
                    raw = b""
        except FetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise BeRealTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        text = raw.decode("utf-8", errors="replace")
        if status != 200:
            raise BeRealHttpStatusError(
                f"HTTP error {status} from {endpoint}: {text[:ERROR_BODY_EXCERPT]}",
                status_code=status,
                body=text,
                endpoint=endpoint,
            )

        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise BeRealResponseParseError(
                f"Failed to parse JSON from {endpoint}: {text[:64]}",
                endpoint=endpoint,
            ) from exc
