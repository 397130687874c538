"""Latest-moments endpoint.

Endpoint:
  - /v1/moments/latest
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from benotified._constants import LATEST_MOMENTS_ENDPOINT
from benotified._transport import Transport
from benotified.config import BeRealConfig
from benotified.exceptions import (
    BeRealResponseParseError,
    EmptyMomentIdError,
    RegionNotFoundError,
)
from benotified.models.moments import LatestMoments

_logger = logging.getLogger(__name__)


async def fetch_latest_moments(config: BeRealConfig, transport: Transport) -> LatestMoments:
    """Fetch and parse the latest moments of every region.

    Raises
    ------
    FetchError
        Any transport, status, read or parse failure. Never retried here.
    """
    endpoint = LATEST_MOMENTS_ENDPOINT
    payload = await transport.get_json(endpoint, {"api_key": config.api_key})
    try:
        snapshot = LatestMoments.model_validate(payload)
    except ValidationError as exc:
        raise BeRealResponseParseError(
            f"Failed to parse JSON from {endpoint}: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc

    _logger.debug("Latest moments: regions=%s now=%s", sorted(snapshot.regions), snapshot.now.utc)
    return snapshot


def extract_moment_id(snapshot: LatestMoments, region: str) -> str:
    """Return the moment id of *region* in *snapshot*.

    Raises
    ------
    RegionNotFoundError
        *region* is not a key of ``snapshot.regions``.
    EmptyMomentIdError
        *region* is present but its moment id is empty.
    """
    moment = snapshot.regions.get(region)
    if moment is None:
        raise RegionNotFoundError(
            f"region '{region}' not found in response",
            region=region,
            endpoint=LATEST_MOMENTS_ENDPOINT,
        )
    if not moment.id:
        raise EmptyMomentIdError(
            f"no moment ID found for region '{region}'",
            region=region,
            endpoint=LATEST_MOMENTS_ENDPOINT,
        )
    return moment.id


async def fetch_latest_moment_id(
    config: BeRealConfig,
    transport: Transport,
    region: str | None = None,
) -> str:
    """Fetch the latest moments and extract one region's id."""
    snapshot = await fetch_latest_moments(config, transport)
    return extract_moment_id(snapshot, region or config.region)
