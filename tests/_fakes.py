"""Minimal stand-ins for the parts of ``aiohttp.ClientSession`` we use."""

from __future__ import annotations

from typing import Any


class FakeResponse:
    def __init__(self, status: int = 200, body: bytes = b"", read_error: Exception | None = None) -> None:
        self.status = status
        self._body = body
        self._read_error = read_error

    async def read(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    async def text(self) -> str:
        return (await self.read()).decode("utf-8")


class _RequestContext:
    def __init__(self, response: FakeResponse | None, error: Exception | None) -> None:
        self._response = response
        self._error = error

    async def __aenter__(self) -> FakeResponse:
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response

    async def __aexit__(self, *exc: Any) -> None:
        return None


class FakeSession:
    """Serves *response* on every call, or one of *responses* per call in order."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        error: Exception | None = None,
        responses: list[FakeResponse] | None = None,
    ) -> None:
        self._response = response
        self._responses = list(responses) if responses is not None else None
        self._error = error
        self.requests: list[tuple[str, str, dict[str, Any]]] = []
        self.closed = False

    def _next_response(self) -> FakeResponse | None:
        if self._responses is not None:
            return self._responses.pop(0)
        return self._response

    def get(self, url: str, **kwargs: Any) -> _RequestContext:
        self.requests.append(("GET", url, kwargs))
        return _RequestContext(self._next_response(), self._error)

    def post(self, url: str, **kwargs: Any) -> _RequestContext:
        self.requests.append(("POST", url, kwargs))
        return _RequestContext(self._next_response(), self._error)

    async def close(self) -> None:
        self.closed = True
