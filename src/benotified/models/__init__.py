"""Data models for moments API responses."""

from benotified.models._base import BeRealBaseModel
from benotified.models.moments import LatestMoments, MomentClock, RegionMoment

__all__ = [
    "BeRealBaseModel",
    "LatestMoments",
    "MomentClock",
    "RegionMoment",
]
