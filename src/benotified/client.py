"""High-level async client for the moments API."""

from __future__ import annotations

from typing import Any

import aiohttp

from benotified._api import moments as _moments_api
from benotified._transport import HttpTransport, Transport
from benotified.config import BeRealConfig
from benotified.exceptions import BeNotifiedError
from benotified.models.moments import LatestMoments


class BeRealClient:
    """Async client for the moments API.

    Usage::

        async with BeRealClient(config) as client:
            moment_id = await client.get_latest_moment_id()
    """

    def __init__(
        self,
        config: BeRealConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None

    @property
    def config(self) -> BeRealConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> BeRealClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise BeNotifiedError("Client not initialized. Use 'async with BeRealClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_latest_moments(self) -> LatestMoments:
        """Fetch the latest moment of every region."""
        return await _moments_api.fetch_latest_moments(self._config, self._require_transport())

    async def get_latest_moment_id(self, region: str | None = None) -> str:
        """Fetch the latest moment id of *region* (default: the configured region)."""
        return await _moments_api.fetch_latest_moment_id(
            self._config,
            self._require_transport(),
            region,
        )
