"""Custom exception hierarchy for benotified."""

from __future__ import annotations


class BeNotifiedError(Exception):
    """Base exception for all benotified errors."""


class BeNotifiedConfigError(BeNotifiedError):
    """Invalid or missing configuration."""


class FetchError(BeNotifiedError):
    """Any failure while fetching or reading the latest moments.

    The poller treats every subclass as transient once the loop is running.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class BeRealTransportError(FetchError):
    """Network-level failure (connection refused, DNS, timeout)."""


class BeRealHttpStatusError(FetchError):
    """The API answered with a status other than 200.

    ``body`` keeps the raw response text for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message, endpoint=endpoint)


class BeRealResponseReadError(FetchError):
    """The response body could not be read to completion."""


class BeRealResponseParseError(FetchError):
    """The response body is not JSON or does not match the expected shape."""


class MomentDataError(FetchError):
    """The snapshot parsed fine but holds no usable moment for a region."""

    def __init__(self, message: str, *, region: str, endpoint: str = "") -> None:
        self.region = region
        super().__init__(message, endpoint=endpoint)


class RegionNotFoundError(MomentDataError):
    """The tracked region key is absent from the ``regions`` mapping."""


class EmptyMomentIdError(MomentDataError):
    """The tracked region is present but its moment ``id`` is empty."""


class NotifierError(BeNotifiedError):
    """Failure on the notification side."""


class BroadcastError(NotifierError):
    """A broadcast message could not be delivered.

    ``status_code`` is ``None`` when the request never got a response.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str = "",
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint
        super().__init__(message)
