"""benotified - Broadcast a LINE message whenever a new BeReal moment starts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("benotified")
except PackageNotFoundError:
    __version__ = "0+local"
from benotified.client import BeRealClient
from benotified.config import BeRealConfig, LineConfig
from benotified.exceptions import (
    BeNotifiedConfigError,
    BeNotifiedError,
    BeRealHttpStatusError,
    BeRealResponseParseError,
    BeRealResponseReadError,
    BeRealTransportError,
    BroadcastError,
    EmptyMomentIdError,
    FetchError,
    MomentDataError,
    NotifierError,
    RegionNotFoundError,
)
from benotified.line import LineBroadcaster
from benotified.models import LatestMoments, MomentClock, RegionMoment
from benotified.poller import MomentPoller, broadcast_once, format_moment_message

__all__ = [
    "__version__",
    "BeNotifiedConfigError",
    "BeNotifiedError",
    "BeRealClient",
    "BeRealConfig",
    "BeRealHttpStatusError",
    "BeRealResponseParseError",
    "BeRealResponseReadError",
    "BeRealTransportError",
    "BroadcastError",
    "EmptyMomentIdError",
    "FetchError",
    "LatestMoments",
    "LineBroadcaster",
    "LineConfig",
    "MomentClock",
    "MomentDataError",
    "MomentPoller",
    "NotifierError",
    "RegionMoment",
    "RegionNotFoundError",
    "broadcast_once",
    "format_moment_message",
]
