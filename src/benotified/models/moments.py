"""Latest-moments response models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictInt, StrictStr, field_validator

from benotified.models._base import BeRealBaseModel


class RegionMoment(BeRealBaseModel):
    """The latest moment of one region.

    Parameters
    ----------
    id : str
        Moment identifier. Empty when the region has no data.
    ts : int
        Unix timestamp of the moment.
    utc : str
        Human-readable UTC time of the moment.
    """

    id: StrictStr = ""
    ts: StrictInt = 0
    utc: StrictStr = ""


class MomentClock(BeRealBaseModel):
    """Server clock reported alongside the regions."""

    ts: StrictInt = 0
    utc: StrictStr = ""


class LatestMoments(BeRealBaseModel):
    """One parsed ``/v1/moments/latest`` response.

    Parameters
    ----------
    regions : dict[str, RegionMoment]
        Latest moment per region key.
    now : MomentClock
        Server time at which the snapshot was produced.
    """

    regions: dict[str, RegionMoment] = Field(default_factory=dict)
    now: MomentClock = Field(default_factory=MomentClock)

    @field_validator("regions", mode="before")
    @classmethod
    def _null_regions_to_empty(cls, value: Any) -> Any:
        # A null region decodes to an empty record, not a validation error.
        if isinstance(value, dict):
            return {key: ({} if item is None else item) for key, item in value.items()}
        return value
