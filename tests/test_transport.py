from __future__ import annotations

import asyncio
import json
import logging

import aiohttp
import pytest

from _fakes import FakeResponse, FakeSession
from benotified._transport import HttpTransport
from benotified.client import BeRealClient
from benotified.config import BeRealConfig
from benotified.exceptions import (
    BeRealHttpStatusError,
    BeRealResponseParseError,
    BeRealResponseReadError,
    BeRealTransportError,
    FetchError,
)

_ENDPOINT = "/v1/moments/latest"
_BODY = json.dumps({"regions": {"asia-east": {"id": "m1", "ts": 1, "utc": "x"}}, "now": {"ts": 2, "utc": "y"}})


def _transport(session: FakeSession, **config_kwargs: object) -> HttpTransport:
    config = BeRealConfig(api_key="key-1", **config_kwargs)  # type: ignore[arg-type]
    return HttpTransport(config, session)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_get_json_success() -> None:
    session = FakeSession(FakeResponse(200, _BODY.encode()))

    result = await _transport(session).get_json(_ENDPOINT, {"api_key": "key-1"})

    assert result["regions"]["asia-east"]["id"] == "m1"
    method, url, kwargs = session.requests[0]
    assert method == "GET"
    assert url == "https://bereal.devin.rest/v1/moments/latest"
    assert kwargs["params"] == {"api_key": "key-1"}


@pytest.mark.asyncio
async def test_get_json_uses_configured_timeout() -> None:
    session = FakeSession(FakeResponse(200, b"{}"))

    await _transport(session, request_timeout=3.0).get_json(_ENDPOINT, {})

    timeout = session.requests[0][2]["timeout"]
    assert isinstance(timeout, aiohttp.ClientTimeout)
    assert timeout.total == 3.0


@pytest.mark.asyncio
async def test_debug_log_hides_api_key(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="benotified._transport")
    session = FakeSession(FakeResponse(200, b"{}"))

    await _transport(session).get_json(_ENDPOINT, {"api_key": "key-1"})

    assert "/v1/moments/latest" in caplog.text
    assert "key-1" not in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [aiohttp.ClientConnectionError("connection refused"), asyncio.TimeoutError()],
)
async def test_connection_failure(error: Exception) -> None:
    session = FakeSession(error=error)

    with pytest.raises(BeRealTransportError) as exc_info:
        await _transport(session).get_json(_ENDPOINT, {})

    assert exc_info.value.endpoint == _ENDPOINT
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_non_ok_status_keeps_code_and_body() -> None:
    session = FakeSession(FakeResponse(401, b'{"error":"invalid api key"}'))

    with pytest.raises(BeRealHttpStatusError) as exc_info:
        await _transport(session).get_json(_ENDPOINT, {})

    exc = exc_info.value
    assert exc.status_code == 401
    assert exc.body == '{"error":"invalid api key"}'
    assert "401" in str(exc)
    assert "invalid api key" in str(exc)


@pytest.mark.asyncio
async def test_non_ok_status_with_unreadable_body() -> None:
    session = FakeSession(FakeResponse(502, read_error=aiohttp.ClientPayloadError("truncated")))

    with pytest.raises(BeRealHttpStatusError) as exc_info:
        await _transport(session).get_json(_ENDPOINT, {})

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == ""


@pytest.mark.asyncio
async def test_body_read_failure() -> None:
    session = FakeSession(FakeResponse(200, read_error=aiohttp.ClientPayloadError("truncated")))

    with pytest.raises(BeRealResponseReadError):
        await _transport(session).get_json(_ENDPOINT, {})


@pytest.mark.asyncio
async def test_malformed_json() -> None:
    session = FakeSession(FakeResponse(200, b"<html>oops</html>"))

    with pytest.raises(BeRealResponseParseError) as exc_info:
        await _transport(session).get_json(_ENDPOINT, {})

    assert "<html>" in str(exc_info.value)


@pytest.mark.asyncio
async def test_deeply_nested_json_is_a_parse_error() -> None:
    session = FakeSession(FakeResponse(200, b"[" * 200_000 + b"]" * 200_000))

    with pytest.raises(BeRealResponseParseError) as exc_info:
        await _transport(session).get_json(_ENDPOINT, {})

    assert isinstance(exc_info.value.__cause__, RecursionError)


def test_fetch_failures_are_distinct() -> None:
    classes = {BeRealTransportError, BeRealHttpStatusError, BeRealResponseReadError, BeRealResponseParseError}
    assert all(issubclass(cls, FetchError) for cls in classes)
    for cls in classes:
        assert not any(issubclass(cls, other) for other in classes - {cls})


@pytest.mark.asyncio
async def test_client_end_to_end_over_http_session() -> None:
    session = FakeSession(FakeResponse(200, _BODY.encode()))

    async with BeRealClient(BeRealConfig(api_key="key-1"), session=session) as client:  # type: ignore[arg-type]
        assert await client.get_latest_moment_id() == "m1"

    # External sessions belong to the caller.
    assert session.closed is False
