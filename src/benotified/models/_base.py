"""Base model for moments API responses.

Every response model inherits from :class:`BeRealBaseModel` which
provides:

* Frozen instances; a snapshot never changes after parsing.
* ``extra="ignore"`` so fields the API adds later are skipped.
* A ``model_validator(mode="before")`` that drops JSON ``null`` values
  so the field default is used, the same way a missing key is handled.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class BeRealBaseModel(BaseModel):
    """Base for moments API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Drop ``null`` values so the field default applies."""
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}
