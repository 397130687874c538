"""Client configuration for benotified."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from benotified._constants import (
    BEREAL_BASE_URL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REGION,
    DEFAULT_REQUEST_TIMEOUT,
    LINE_BASE_URL,
)
from benotified.exceptions import BeNotifiedConfigError


def _env_float(env_key: str, value: str | None, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise BeNotifiedConfigError(f"{env_key} must be a number, got {value!r}") from exc
    if parsed <= 0:
        raise BeNotifiedConfigError(f"{env_key} must be positive, got {value!r}")
    return parsed


def _collect(env_map: dict[str, str], overrides: dict[str, Any]) -> dict[str, Any]:
    """Read string fields from the environment, skipping overridden ones."""
    env = os.environ
    kwargs: dict[str, Any] = {}
    for env_key, field_name in env_map.items():
        if field_name in overrides:
            continue
        val = env.get(env_key)
        # Values pass through untouched; only an unset or empty variable is skipped.
        if val:
            kwargs[field_name] = val
    return kwargs


@dataclasses.dataclass(frozen=True)
class BeRealConfig:
    """Configuration for the moments API client.

    Parameters
    ----------
    api_key : str
        API key passed as the ``api_key`` query parameter.
    base_url : str
        API base URL.
    region : str
        Region key whose moment id is tracked (e.g. ``"asia-east"``).
    poll_interval : float
        Seconds to wait between two polls.
    request_timeout : float
        Total timeout in seconds for one fetch.
    """

    api_key: str
    base_url: str = BEREAL_BASE_URL
    region: str = DEFAULT_REGION
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if not self.api_key:
            raise BeNotifiedConfigError("BEREAL_API_KEY environment variable not set")
        if not self.region:
            raise BeNotifiedConfigError("region must not be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> BeRealConfig:
        """Create configuration from environment variables.

        Reads ``BEREAL_API_KEY`` (required) and the optional
        ``BEREAL_BASE_URL``, ``BEREAL_REGION``, ``BEREAL_POLL_INTERVAL``
        and ``BEREAL_REQUEST_TIMEOUT``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        BeNotifiedConfigError
            If the API key is missing or a numeric value cannot be parsed.
        """
        env = os.environ
        config_kwargs = _collect(
            {
                "BEREAL_API_KEY": "api_key",
                "BEREAL_BASE_URL": "base_url",
                "BEREAL_REGION": "region",
            },
            overrides,
        )

        if "poll_interval" not in overrides:
            config_kwargs["poll_interval"] = _env_float(
                "BEREAL_POLL_INTERVAL",
                env.get("BEREAL_POLL_INTERVAL"),
                DEFAULT_POLL_INTERVAL,
            )
        if "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float(
                "BEREAL_REQUEST_TIMEOUT",
                env.get("BEREAL_REQUEST_TIMEOUT"),
                DEFAULT_REQUEST_TIMEOUT,
            )

        config_kwargs.update(overrides)
        config_kwargs.setdefault("api_key", "")

        return cls(**config_kwargs)


@dataclasses.dataclass(frozen=True)
class LineConfig:
    """Configuration for the LINE broadcast channel.

    Parameters
    ----------
    channel_access_token : str
        Long-lived channel access token of the Messaging API channel.
    base_url : str
        Messaging API base URL.
    request_timeout : float
        Total timeout in seconds for one broadcast request.
    """

    channel_access_token: str = dataclasses.field(repr=False)
    base_url: str = LINE_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if not self.channel_access_token:
            raise BeNotifiedConfigError("LINE_CHANNEL_ACCESS_TOKEN environment variable not set")

    @classmethod
    def from_env(cls, **overrides: Any) -> LineConfig:
        """Create configuration from ``LINE_*`` environment variables."""
        env = os.environ
        config_kwargs = _collect(
            {
                "LINE_CHANNEL_ACCESS_TOKEN": "channel_access_token",
                "LINE_API_BASE_URL": "base_url",
            },
            overrides,
        )
        if "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float(
                "LINE_REQUEST_TIMEOUT",
                env.get("LINE_REQUEST_TIMEOUT"),
                DEFAULT_REQUEST_TIMEOUT,
            )

        config_kwargs.update(overrides)
        config_kwargs.setdefault("channel_access_token", "")

        return cls(**config_kwargs)
